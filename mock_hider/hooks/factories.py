"""Mock object factory functions.

Creates stand-ins for the Android framework objects the hooked surfaces are
called on and return: Location, LocationManager, WifiManager, ScanResult and
friends.
"""
from typing import Dict, List, Optional
from ..types import JavaObject, java_list
from ..config import hide_config


def create_mock_location(provider: str = "gps", from_mock_provider: bool = True,
                         extras: Optional[Dict] = None) -> JavaObject:
    """Create an android.location.Location object.
    
    Args:
        provider: Provider name that produced the fix
        from_mock_provider: Whether the fix came from a test provider
        extras: Extras Bundle (a mock fix gets the mock marker key by default)
    """
    loc = JavaObject("Landroid/location/Location;")
    loc._mock_type = "Location"
    loc.fields["mProvider"] = provider
    loc.fields["mIsMock"] = from_mock_provider
    if extras is None:
        extras = {"satellites": 0}
        if from_mock_provider:
            extras[hide_config.mock_extra_key] = True
    loc._extras = extras
    return loc


def create_location_manager(providers: Optional[List[str]] = None) -> JavaObject:
    """Create an android.location.LocationManager object.
    
    Args:
        providers: Registered provider names (standard ones plus a test provider
            if not provided)
    """
    lm = JavaObject("Landroid/location/LocationManager;")
    lm._mock_type = "LocationManager"
    if providers is None:
        providers = list(hide_config.standard_providers) + ["test_provider"]
    lm._providers = providers
    lm._gps_listeners = []
    return lm


def create_scan_result(bssid: str, ssid: str = "", level: int = -60) -> JavaObject:
    """Create an android.net.wifi.ScanResult object."""
    sr = JavaObject("Landroid/net/wifi/ScanResult;")
    sr._mock_type = "ScanResult"
    sr.fields["BSSID"] = bssid
    sr.fields["SSID"] = ssid
    sr.fields["level"] = level
    return sr


def create_wifi_manager(scan_results: Optional[List[JavaObject]] = None) -> JavaObject:
    """Create an android.net.wifi.WifiManager object."""
    wm = JavaObject("Landroid/net/wifi/WifiManager;")
    wm._mock_type = "WifiManager"
    if scan_results is None:
        scan_results = [create_scan_result("00:11:22:33:44:55", "home")]
    wm._scan_results = scan_results
    return wm


def create_cell_info(cid: int = 1234, lac: int = 56) -> JavaObject:
    """Create an android.telephony.CellInfoLte object."""
    ci = JavaObject("Landroid/telephony/CellInfoLte;")
    ci._mock_type = "CellInfo"
    ci.fields["ci"] = cid
    ci.fields["tac"] = lac
    return ci


def create_telephony_manager(cells: Optional[List[JavaObject]] = None) -> JavaObject:
    """Create an android.telephony.TelephonyManager object."""
    tm = JavaObject("Landroid/telephony/TelephonyManager;")
    tm._mock_type = "TelephonyManager"
    if cells is None:
        cells = [create_cell_info()]
    tm._cells = cells
    return tm


def create_cell_location(cid: int = 1234, lac: int = 56) -> JavaObject:
    """Create an android.telephony.gsm.GsmCellLocation object."""
    cl = JavaObject("Landroid/telephony/gsm/GsmCellLocation;")
    cl._mock_type = "CellLocation"
    cl.fields["mCid"] = cid
    cl.fields["mLac"] = lac
    return cl


def create_content_resolver(settings: Optional[Dict[str, str]] = None) -> JavaObject:
    """Create an android.content.ContentResolver backed by a Settings.Secure table.
    
    The default table has the legacy mock location switch turned on.
    """
    cr = JavaObject("Landroid/content/ContentResolver;")
    cr._mock_type = "ContentResolver"
    if settings is None:
        settings = {hide_config.mock_setting_name: "1", "android_id": "9774d56d682e549c"}
    cr._secure_settings = settings
    return cr


def provider_list(providers: List[str]) -> JavaObject:
    """Wrap provider names in a java.util.ArrayList."""
    return java_list(providers)


# Known mock class names
HOOKED_CLASSES = {
    "Landroid/location/Location;",
    "Landroid/location/LocationManager;",
    "Landroid/net/wifi/WifiManager;",
    "Landroid/telephony/TelephonyManager;",
    "Landroid/content/ContentResolver;",
}


def create_mock_for_class(class_name: str) -> Optional[JavaObject]:
    """Create a mock object for the given Android class.
    
    Args:
        class_name: Class name like "Landroid/location/Location;"
        
    Returns:
        Mock object or None if class is not mockable
    """
    if class_name == "Landroid/location/Location;":
        return create_mock_location()
    elif class_name == "Landroid/location/LocationManager;":
        return create_location_manager()
    elif class_name == "Landroid/net/wifi/WifiManager;":
        return create_wifi_manager()
    elif class_name == "Landroid/telephony/TelephonyManager;":
        return create_telephony_manager()
    elif class_name == "Landroid/content/ContentResolver;":
        return create_content_resolver()
    return None
