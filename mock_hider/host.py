"""Interception hosts.

InterceptionHost is what the engine needs from a hooking framework: a
platform level, a support query and an idempotent bind. HookRegistry is the
in-process implementation: calls are dispatched by Dalvik method signature to
the bound rule, the way an emulator routes invoke instructions to its method
hooks.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import hide_config
from .engine import apply_rule
from .errors import UnavailableSurface
from .rules import Rule
from .surfaces import PLATFORM_SURFACES, Surface
from .types import CallOutcome
from .utils import debug_log


@dataclass(frozen=True)
class BindingHandle:
    process_identity: str
    signature: str
    rule: Rule


class InterceptionHost(ABC):
    sdk_int: int

    @abstractmethod
    def supports(self, surface: Surface) -> bool:
        """Whether the surface exists on this platform level."""

    @abstractmethod
    def bind(self, process_identity: str, rule: Rule) -> BindingHandle:
        """Install rule for process_identity.

        Must return the existing handle when the same surface is already bound
        for the process.

        Raises:
            UnavailableSurface: the target method does not exist
        """


class HookRegistry(InterceptionHost):
    """In-process interception host.

    Args:
        sdk_int: Platform API level (configured default if None)
        platform: signature -> Surface catalog of methods the platform has
    """

    def __init__(self, sdk_int: Optional[int] = None, platform: Optional[Dict[str, Surface]] = None):
        self.sdk_int = sdk_int if sdk_int is not None else hide_config.sdk_int
        self.platform = platform if platform is not None else PLATFORM_SURFACES
        self._bindings: Dict[Tuple[str, str], BindingHandle] = {}
        self._load_listeners: List[Callable[[str], Any]] = []

    def supports(self, surface: Surface) -> bool:
        known = self.platform.get(surface.signature)
        return known is not None and known.available_on(self.sdk_int)

    def bind(self, process_identity: str, rule: Rule) -> BindingHandle:
        key = (process_identity, rule.signature)
        existing = self._bindings.get(key)
        if existing is not None:
            debug_log(f"{rule.signature} already bound for {process_identity}")
            return existing
        if not self.supports(rule.surface):
            raise UnavailableSurface(rule.signature, self.sdk_int)
        handle = BindingHandle(process_identity, rule.signature, rule)
        self._bindings[key] = handle
        return handle

    def get_binding(self, process_identity: str, signature: str) -> Optional[BindingHandle]:
        return self._bindings.get((process_identity, signature))

    def bindings(self, process_identity: str) -> List[BindingHandle]:
        return [h for (proc, _), h in self._bindings.items() if proc == process_identity]

    def add_load_listener(self, listener: Callable[[str], Any]) -> None:
        """Subscribe to load-package events."""
        self._load_listeners.append(listener)

    def load_package(self, process_identity: str) -> None:
        """Fire a load-package event for a process."""
        for listener in self._load_listeners:
            listener(process_identity)

    def invoke(self, process_identity: str, signature: str, args: List,
               real_call: Callable[[], Any]) -> CallOutcome:
        """Dispatch one call made by a process.

        Unhooked signatures call straight through to real_call.
        """
        handle = self.get_binding(process_identity, signature)
        if handle is None:
            return CallOutcome(real_call(), executed=True)
        return apply_rule(handle.rule, args, real_call)
