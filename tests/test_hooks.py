"""Unit tests for the result transformers (location, telephony, settings)."""
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mock_hider.config import hide_config
from mock_hider.errors import TransformerRuntimeFault
from mock_hider.types import CallArg, JavaObject, java_string, java_list
from mock_hider.hooks import (
    suppress_mock_flag,
    suppress_modern_mock_flag,
    strip_mock_marker,
    fake_success,
    filter_standard_list,
    empty_collection,
    null_result,
    mask_setting,
    create_mock_location,
    create_content_resolver,
    create_location_manager,
    create_wifi_manager,
    create_telephony_manager,
    create_mock_for_class,
)


class TestMockObjectFactories(unittest.TestCase):
    """Tests for mock framework object factories."""

    def test_create_mock_location(self):
        """A mock fix carries the mock flag and marker extra."""
        loc = create_mock_location()
        self.assertEqual(loc.class_name, "Landroid/location/Location;")
        self.assertEqual(loc._mock_type, "Location")
        self.assertTrue(loc.fields["mIsMock"])
        self.assertTrue(loc._extras[hide_config.mock_extra_key])

    def test_create_real_location(self):
        """A real fix has no marker extra."""
        loc = create_mock_location(provider="network", from_mock_provider=False)
        self.assertEqual(loc.fields["mProvider"], "network")
        self.assertNotIn(hide_config.mock_extra_key, loc._extras)

    def test_create_location_manager(self):
        """Default LocationManager has a test provider registered."""
        lm = create_location_manager()
        self.assertIn("test_provider", lm._providers)
        self.assertEqual(create_location_manager(["gps"])._providers, ["gps"])

    def test_create_wifi_and_telephony(self):
        """Wi-Fi and telephony managers come with one visible entry each."""
        self.assertEqual(len(create_wifi_manager()._scan_results), 1)
        self.assertEqual(len(create_telephony_manager()._cells), 1)

    def test_content_resolver_mock_setting_on(self):
        """Default secure settings have mock_location enabled."""
        cr = create_content_resolver()
        self.assertEqual(cr._secure_settings[hide_config.mock_setting_name], "1")

    def test_create_mock_for_class(self):
        """create_mock_for_class covers every hooked class."""
        loc = create_mock_for_class("Landroid/location/Location;")
        self.assertEqual(loc._mock_type, "Location")
        self.assertIsNone(create_mock_for_class("Ljava/lang/Object;"))


class TestMockFlagHooks(unittest.TestCase):
    """Tests for Location.isFromMockProvider() / isMock() hooks."""
    
    def test_suppress_mock_flag(self):
        """isFromMockProvider() is false even for a mock fix."""
        loc = create_mock_location(from_mock_provider=True)
        self.assertIs(suppress_mock_flag([CallArg(loc)], None), False)
    
    def test_suppress_mock_flag_ignores_real_result(self):
        """isFromMockProvider() ignores any real value passed in."""
        self.assertIs(suppress_mock_flag([], True), False)
    
    def test_suppress_modern_mock_flag(self):
        """isMock() is always false."""
        loc = create_mock_location(from_mock_provider=True)
        self.assertIs(suppress_modern_mock_flag([CallArg(loc)], True), False)


class TestStripMockMarker(unittest.TestCase):
    """Tests for the Location.getExtras() hook."""
    
    def test_removes_marker(self):
        """mockLocation key is removed, other extras kept."""
        extras = {"mockLocation": True, "other": 1}
        result = strip_mock_marker([], extras)
        self.assertEqual(result, {"other": 1})
        self.assertIs(result, extras)  # modified in place
    
    def test_empty_bundle(self):
        """Empty Bundle is a no-op."""
        self.assertEqual(strip_mock_marker([], {}), {})
    
    def test_null_bundle(self):
        """null extras stay null."""
        self.assertIsNone(strip_mock_marker([], None))
    
    def test_without_marker(self):
        """Bundle without the marker is unchanged."""
        self.assertEqual(strip_mock_marker([], {"satellites": 7}), {"satellites": 7})
    
    def test_custom_key(self):
        """A different marker key can be configured per rule."""
        self.assertEqual(strip_mock_marker([], {"isMock": 1, "a": 2}, key="isMock"), {"a": 2})
    
    def test_location_extras(self):
        """Extras of a mock Location lose the marker."""
        loc = create_mock_location()
        self.assertIn(hide_config.mock_extra_key, loc._extras)
        result = strip_mock_marker([CallArg(loc)], loc._extras)
        self.assertNotIn(hide_config.mock_extra_key, result)
    
    def test_not_a_bundle(self):
        """Non-mapping results are a transformer fault."""
        with self.assertRaises(TransformerRuntimeFault):
            strip_mock_marker([], ["mockLocation"])


class TestReplacementHooks(unittest.TestCase):
    """Tests for Wi-Fi, telephony and satellite listener hooks."""
    
    def test_empty_collection(self):
        """getScanResults() returns an empty list, never null."""
        result = empty_collection([], None)
        self.assertIsNotNone(result)
        self.assertEqual(result, [])
    
    def test_empty_collection_fresh_list(self):
        """Each call gets its own list."""
        first = empty_collection([], None)
        first.append("leak")
        self.assertEqual(empty_collection([], None), [])
    
    def test_null_result(self):
        """getCellLocation() returns null."""
        self.assertIsNone(null_result([], JavaObject("Landroid/telephony/gsm/GsmCellLocation;")))
    
    def test_fake_success(self):
        """addGpsStatusListener() reports success without registering."""
        lm = create_location_manager()
        self.assertIs(fake_success([CallArg(lm), CallArg("listener")], None), True)
        self.assertEqual(lm._gps_listeners, [])


class TestMaskSetting(unittest.TestCase):
    """Tests for the Settings.Secure.getString() hook."""
    
    def test_mock_location_masked(self):
        """mock_location reads as "0"."""
        cr = create_content_resolver()
        args = [CallArg(cr), CallArg("mock_location")]
        self.assertEqual(mask_setting(args, "1"), "0")
    
    def test_other_setting_passthrough(self):
        """Other settings pass through."""
        args = [CallArg(None), CallArg("other_setting")]
        self.assertEqual(mask_setting(args, "1"), "1")
    
    def test_java_string_argument(self):
        """Setting name given as a String object is matched."""
        args = [CallArg(None), CallArg(java_string("mock_location"))]
        self.assertEqual(mask_setting(args, "1"), "0")
    
    def test_plain_arguments(self):
        """Unwrapped argument values work too."""
        self.assertEqual(mask_setting([None, "mock_location", 0], "1"), "0")
    
    def test_exact_match_only(self):
        """No prefix or case-insensitive matching."""
        self.assertEqual(mask_setting([None, "MOCK_LOCATION"], "1"), "1")
        self.assertEqual(mask_setting([None, "mock_location_app"], "1"), "1")
    
    def test_masked_when_unset(self):
        """mock_location reads as "0" even when the real value is null."""
        self.assertEqual(mask_setting([None, "mock_location"], None), "0")
    
    def test_missing_name_argument(self):
        """Missing setting name is a transformer fault."""
        with self.assertRaises(TransformerRuntimeFault):
            mask_setting([CallArg(None)], "1")


class TestFilterStandardList(unittest.TestCase):
    """Tests for the LocationManager provider list hooks."""
    
    def test_removes_test_provider(self):
        """Non-standard providers are dropped, order kept."""
        providers = ["gps", "network", "test", "passive"]
        result = filter_standard_list([], providers)
        self.assertEqual(result, ["gps", "network", "passive"])
        self.assertIs(result, providers)
    
    def test_adjacent_removals(self):
        """Consecutive non-standard entries are all removed."""
        result = filter_standard_list([], ["a", "b", "gps", "c", "d", "fused", "e"])
        self.assertEqual(result, ["gps", "fused"])
    
    def test_all_removed(self):
        """A list of only test providers ends up empty."""
        self.assertEqual(filter_standard_list([], ["mock1", "mock2"]), [])
    
    def test_nothing_removed(self):
        """Standard-only list is unchanged."""
        providers = ["passive", "gps", "network", "fused"]
        self.assertEqual(filter_standard_list([], list(providers)), providers)
    
    def test_duplicates_kept(self):
        """Duplicate standard entries are not dropped."""
        self.assertEqual(filter_standard_list([], ["gps", "gps", "x"]), ["gps", "gps"])
    
    def test_custom_allowlist(self):
        """Allowlist can be given per rule."""
        self.assertEqual(filter_standard_list([], ["gps", "network"], allowed={"gps"}), ["gps"])
    
    def test_tuple_rebuilt(self):
        """Immutable sequences come back as the same type."""
        result = filter_standard_list([], ("gps", "test"))
        self.assertEqual(result, ("gps",))
    
    def test_java_list(self):
        """java.util.List objects are pruned in place."""
        lst = java_list(["gps", "test_provider", "network"])
        result = filter_standard_list([], lst)
        self.assertIs(result, lst)
        self.assertEqual(lst._list_data, ["gps", "network"])

    def test_java_list_of_strings(self):
        """Entries that are String objects are matched by their value."""
        lst = java_list([java_string("gps"), java_string("test"), java_string("network")])
        result = filter_standard_list([], lst)
        self.assertIs(result, lst)
        self.assertEqual([s.internal_value for s in lst._list_data], ["gps", "network"])

    def test_wrapped_entries(self):
        """Entries wrapped in call arguments are unwrapped before matching."""
        result = filter_standard_list([], [CallArg("gps"), CallArg("mock"), CallArg(java_string("fused"))])
        self.assertEqual(len(result), 2)
        self.assertEqual(result[0].value, "gps")

    def test_tuple_of_strings_rebuilt(self):
        """String objects in an immutable sequence are matched too."""
        result = filter_standard_list([], (java_string("passive"), java_string("x")))
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].internal_value, "passive")

    def test_null_list(self):
        """null stays null."""
        self.assertIsNone(filter_standard_list([], None))
    
    def test_malformed_results(self):
        """Non-list results are a transformer fault and left untouched."""
        for bad in (42, "gps", {"gps": 1}, JavaObject("Ljava/lang/Object;")):
            with self.assertRaises(TransformerRuntimeFault):
                filter_standard_list([], bad)


if __name__ == '__main__':
    unittest.main()
