"""The interception rule table.

One rule per intercepted surface, grouped like the hook modules.
"""
from typing import List, Optional

from .. import surfaces
from ..rules import ActionKind, Rule, validate_rule_table
from .location_hooks import (
    suppress_mock_flag,
    suppress_modern_mock_flag,
    strip_mock_marker,
    fake_success,
    filter_standard_list,
)
from .telephony_hooks import empty_collection, null_result
from .settings_hooks import mask_setting


RULE_TABLE: List[Rule] = validate_rule_table([
    # Location mock flags
    Rule(surfaces.IS_FROM_MOCK_PROVIDER, ActionKind.REPLACE_RETURN, suppress_mock_flag),
    Rule(surfaces.IS_MOCK, ActionKind.REPLACE_RETURN, suppress_modern_mock_flag, version_gated=True),
    Rule(surfaces.GET_EXTRAS, ActionKind.STRIP_KEY, strip_mock_marker),
    
    # Wi-Fi and cell positioning
    Rule(surfaces.GET_SCAN_RESULTS, ActionKind.REPLACE_RETURN, empty_collection),
    Rule(surfaces.GET_CELL_LOCATION, ActionKind.REPLACE_RETURN, null_result),
    Rule(surfaces.GET_ALL_CELL_INFO, ActionKind.REPLACE_RETURN, empty_collection),
    Rule(surfaces.GET_NEIGHBORING_CELL_INFO, ActionKind.REPLACE_RETURN, empty_collection),
    
    # Satellite status listeners
    Rule(surfaces.ADD_GPS_STATUS_LISTENER, ActionKind.REPLACE_RETURN, fake_success),
    Rule(surfaces.REGISTER_GNSS_STATUS_CALLBACK, ActionKind.REPLACE_RETURN, fake_success,
         version_gated=True),
    Rule(surfaces.REGISTER_GNSS_STATUS_CALLBACK_HANDLER, ActionKind.REPLACE_RETURN, fake_success,
         version_gated=True),
    
    # Settings.Secure mock_location switch
    Rule(surfaces.SECURE_GET_STRING, ActionKind.MUTATE_FIELD, mask_setting),
    Rule(surfaces.SECURE_GET_STRING_FOR_USER, ActionKind.MUTATE_FIELD, mask_setting),
    
    # Provider lists
    Rule(surfaces.GET_PROVIDERS, ActionKind.FILTER_LIST, filter_standard_list),
    Rule(surfaces.GET_ALL_PROVIDERS, ActionKind.FILTER_LIST, filter_standard_list),
])


def get_rule(signature: str) -> Optional[Rule]:
    """Find the rule for an exact surface signature."""
    for rule in RULE_TABLE:
        if rule.signature == signature:
            return rule
    return None


def find_rule(trace_str: str) -> Optional[Rule]:
    """Find the rule whose surface appears in a disassembled invoke line.
    
    androguard separates parameter types with spaces, e.g.
    "getString(Landroid/content/ContentResolver; Ljava/lang/String;)", so spaces
    are dropped before matching.
    """
    compact = trace_str.replace(" ", "")
    for rule in RULE_TABLE:
        if rule.signature in compact:
            return rule
    return None
