"""Location and LocationManager hooks.

Hooks for Location mock flags and extras, satellite status registration and
the provider lists.
"""
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Iterable, List, Optional

from ..config import hide_config
from ..errors import TransformerRuntimeFault
from ..types import JavaObject


def suppress_mock_flag(args: List, result: Any) -> Any:
    """Location.isFromMockProvider() -> false"""
    return False


def suppress_modern_mock_flag(args: List, result: Any) -> Any:
    """Location.isMock() -> false (API 31+)"""
    return False


def strip_mock_marker(args: List, result: Any, key: Optional[str] = None) -> Any:
    """Location.getExtras() -> Bundle without the mock marker key.
    
    Runs on the real Bundle, which is modified in place.
    """
    if key is None:
        key = hide_config.mock_extra_key
    if result is None:
        return result
    if not isinstance(result, MutableMapping):
        raise TransformerRuntimeFault(
            "strip_mock_marker", f"expected a Bundle mapping, got {type(result).__name__}"
        )
    if key in result:
        del result[key]
    return result


def fake_success(args: List, result: Any) -> Any:
    """LocationManager.addGpsStatusListener() / registerGnssStatusCallback() -> true
    
    Nothing is registered, so the app's listener never fires. An app that
    receives no satellite callbacks assumes a fix is still pending, which is
    less suspicious than a fix with zero satellites.
    """
    return True


def filter_standard_list(args: List, result: Any, allowed: Optional[Iterable[str]] = None) -> Any:
    """LocationManager.getProviders() / getAllProviders() -> standard providers only.
    
    Test providers registered by a mock location app are removed. Mutable
    lists are pruned in place, walking back to front so deleting an entry
    never shifts one that is still to be checked.
    
    Args:
        args: Call arguments (unused)
        result: Real provider list
        allowed: Provider names to keep (configured standard providers if None)
    """
    if allowed is None:
        allowed = hide_config.standard_providers
    allowed = frozenset(allowed)
    if result is None:
        return result
    
    if isinstance(result, JavaObject):
        if not result.is_list():
            raise TransformerRuntimeFault(
                "filter_standard_list", f"expected a List, got {result.class_name}"
            )
        _prune(result._list_data, allowed)
        return result
    
    if isinstance(result, (str, bytes, Mapping)) or not isinstance(result, Sequence):
        raise TransformerRuntimeFault(
            "filter_standard_list", f"expected a List, got {type(result).__name__}"
        )
    
    if isinstance(result, MutableSequence):
        _prune(result, allowed)
        return result
    
    # Immutable sequence: rebuild with the same type
    return type(result)(name for name in result if _provider_name(name) in allowed)


def _provider_name(entry):
    """Unwrap a list entry to its provider name (plain str or String object)."""
    if hasattr(entry, "value"):
        entry = entry.value
    if isinstance(entry, JavaObject):
        return getattr(entry, "internal_value", None)
    return entry


def _prune(names: MutableSequence, allowed: frozenset) -> None:
    for i in range(len(names) - 1, -1, -1):
        if _provider_name(names[i]) not in allowed:
            del names[i]
