"""Settings.Secure hooks."""
from typing import Any, List, Optional

from ..config import hide_config
from ..errors import TransformerRuntimeFault
from ..types import JavaObject


def mask_setting(args: List, result: Any, name: Optional[str] = None,
                 masked: Optional[str] = None) -> Any:
    """Settings.Secure.getString(ContentResolver, String) -> "0" for mock_location
    
    Runs after the real lookup; every other setting passes through.
    """
    if name is None:
        name = hide_config.mock_setting_name
    if masked is None:
        masked = hide_config.mock_setting_masked
    if len(args) < 2:
        raise TransformerRuntimeFault("mask_setting", f"expected a setting name argument, got {len(args)} args")
    
    name_arg = args[1].value if hasattr(args[1], 'value') else args[1]
    if isinstance(name_arg, JavaObject) and hasattr(name_arg, 'internal_value'):
        name_arg = name_arg.internal_value
    
    if name_arg == name:
        return masked
    return result
