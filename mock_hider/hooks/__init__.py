"""Result transformers and the rule table that binds them.

Module structure:
- location_hooks.py: Location flags/extras, satellite listeners, provider lists
- telephony_hooks.py: Wi-Fi scan results and cell info
- settings_hooks.py: Settings.Secure lookups
- factories.py: Mock Android framework objects
- table.py: RULE_TABLE and rule lookup
"""
from .location_hooks import (
    suppress_mock_flag,
    suppress_modern_mock_flag,
    strip_mock_marker,
    fake_success,
    filter_standard_list,
)
from .telephony_hooks import empty_collection, null_result
from .settings_hooks import mask_setting
from .factories import (
    create_mock_location,
    create_location_manager,
    create_wifi_manager,
    create_scan_result,
    create_telephony_manager,
    create_cell_info,
    create_cell_location,
    create_content_resolver,
    create_mock_for_class,
    provider_list,
    HOOKED_CLASSES,
)
from .table import RULE_TABLE, get_rule, find_rule

__all__ = [
    'suppress_mock_flag',
    'suppress_modern_mock_flag',
    'strip_mock_marker',
    'fake_success',
    'filter_standard_list',
    'empty_collection',
    'null_result',
    'mask_setting',
    'create_mock_location',
    'create_location_manager',
    'create_wifi_manager',
    'create_scan_result',
    'create_telephony_manager',
    'create_cell_info',
    'create_cell_location',
    'create_content_resolver',
    'create_mock_for_class',
    'provider_list',
    'HOOKED_CLASSES',
    'RULE_TABLE',
    'get_rule',
    'find_rule',
]
