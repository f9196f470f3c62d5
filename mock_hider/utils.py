"""Shared utilities for the hook layer.

This module provides common helper functions:
- Logging (verbose, debug and the always-on hook log)
- Value formatting for display in Java notation
"""
from typing import Any

from .colors import info, warn
from .config import hide_config

# Global verbosity flags - set by CLI
VERBOSE = False
DEBUG = False


def set_verbose(verbose: bool, debug: bool = False) -> None:
    """Set global verbosity flags."""
    global VERBOSE, DEBUG
    VERBOSE = verbose or debug
    DEBUG = debug


def log(msg: str) -> None:
    """Print log message only in verbose mode."""
    if VERBOSE:
        print(msg)


def debug_log(msg: str) -> None:
    """Print debug message only in debug mode."""
    if DEBUG:
        print(info(f"[DEBUG] {msg}"))


def hook_log(msg: str) -> None:
    """Always-on log for hook failures, prefixed with the configured tag."""
    print(warn(f"{hide_config.tag} {msg}"))


def format_value(val: Any) -> str:
    """Format a call value for display.
    
    Handles:
    - None -> "null"
    - bool -> "true" / "false"
    - JavaObject with internal_value -> quoted string
    - JavaObject list -> [a, b, ...]
    - JavaObject -> <ClassName>
    - list / tuple -> [a, b, ...]
    - dict (Bundle) -> Bundle[{k=v, ...}]
    - str -> quoted string
    - any other -> str(val)
    """
    # Import here to avoid circular imports
    from .types import JavaObject
    
    if val is None:
        return "null"
    
    if isinstance(val, bool):
        return "true" if val else "false"
    
    if isinstance(val, JavaObject):
        if val.is_list():
            return format_value(val._list_data)
        if getattr(val, 'internal_value', None) is not None:
            return f'"{val.internal_value}"'
        return f"<{val.class_name}>"
    
    if isinstance(val, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in val) + "]"
    
    if isinstance(val, dict):
        pairs = ", ".join(f"{k}={format_value(v)}" for k, v in val.items())
        return f"Bundle[{{{pairs}}}]"
    
    if isinstance(val, str):
        return f'"{val}"'
    
    return str(val)
