"""Intercepted platform methods and the API levels at which they exist.

Signatures use the Dalvik notation seen in disassembled invoke instructions,
e.g. "Landroid/location/Location;->isMock()Z".
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .config import hide_config


@dataclass(frozen=True)
class Surface:
    class_name: str  # "Landroid/location/Location;"
    method_name: str
    descriptor: str  # "(Landroid/os/Handler;)Z"
    added_sdk: int = 1
    removed_sdk: Optional[int] = None  # first level without the method

    @property
    def signature(self) -> str:
        return f"{self.class_name}->{self.method_name}{self.descriptor}"

    def available_on(self, sdk_int: int) -> bool:
        if sdk_int < self.added_sdk:
            return False
        return self.removed_sdk is None or sdk_int < self.removed_sdk

    def __str__(self):
        return self.signature


LOCATION = "Landroid/location/Location;"
LOCATION_MANAGER = "Landroid/location/LocationManager;"
WIFI_MANAGER = "Landroid/net/wifi/WifiManager;"
TELEPHONY_MANAGER = "Landroid/telephony/TelephonyManager;"
SETTINGS_SECURE = "Landroid/provider/Settings$Secure;"

_LIST = "Ljava/util/List;"
_STRING = "Ljava/lang/String;"
_RESOLVER = "Landroid/content/ContentResolver;"
_GNSS_CALLBACK = "Landroid/location/GnssStatus$Callback;"


# Location
IS_FROM_MOCK_PROVIDER = Surface(LOCATION, "isFromMockProvider", "()Z", added_sdk=18)
IS_MOCK = Surface(LOCATION, "isMock", "()Z", added_sdk=hide_config.MOCK_API_SDK)
GET_EXTRAS = Surface(LOCATION, "getExtras", "()Landroid/os/Bundle;")

# Wi-Fi
GET_SCAN_RESULTS = Surface(WIFI_MANAGER, "getScanResults", f"(){_LIST}")

# Telephony
GET_CELL_LOCATION = Surface(TELEPHONY_MANAGER, "getCellLocation", "()Landroid/telephony/CellLocation;")
GET_ALL_CELL_INFO = Surface(TELEPHONY_MANAGER, "getAllCellInfo", f"(){_LIST}", added_sdk=17)
GET_NEIGHBORING_CELL_INFO = Surface(
    TELEPHONY_MANAGER, "getNeighboringCellInfo", f"(){_LIST}", added_sdk=3, removed_sdk=29
)

# Satellite status
ADD_GPS_STATUS_LISTENER = Surface(
    LOCATION_MANAGER, "addGpsStatusListener", "(Landroid/location/GpsStatus$Listener;)Z", added_sdk=3
)
REGISTER_GNSS_STATUS_CALLBACK = Surface(
    LOCATION_MANAGER, "registerGnssStatusCallback", f"({_GNSS_CALLBACK})Z",
    added_sdk=hide_config.GNSS_API_SDK,
)
REGISTER_GNSS_STATUS_CALLBACK_HANDLER = Surface(
    LOCATION_MANAGER, "registerGnssStatusCallback", f"({_GNSS_CALLBACK}Landroid/os/Handler;)Z",
    added_sdk=hide_config.GNSS_API_SDK,
)

# Settings
SECURE_GET_STRING = Surface(SETTINGS_SECURE, "getString", f"({_RESOLVER}{_STRING}){_STRING}", added_sdk=3)
# Hidden API, present since multi-user support
SECURE_GET_STRING_FOR_USER = Surface(
    SETTINGS_SECURE, "getStringForUser", f"({_RESOLVER}{_STRING}I){_STRING}", added_sdk=17
)

# Provider lists
GET_PROVIDERS = Surface(LOCATION_MANAGER, "getProviders", f"(Z){_LIST}")
GET_ALL_PROVIDERS = Surface(LOCATION_MANAGER, "getAllProviders", f"(){_LIST}")


# Platform catalog: signature -> Surface
PLATFORM_SURFACES: Dict[str, Surface] = {
    s.signature: s for s in (
        IS_FROM_MOCK_PROVIDER,
        IS_MOCK,
        GET_EXTRAS,
        GET_SCAN_RESULTS,
        GET_CELL_LOCATION,
        GET_ALL_CELL_INFO,
        GET_NEIGHBORING_CELL_INFO,
        ADD_GPS_STATUS_LISTENER,
        REGISTER_GNSS_STATUS_CALLBACK,
        REGISTER_GNSS_STATUS_CALLBACK_HANDLER,
        SECURE_GET_STRING,
        SECURE_GET_STRING_FOR_USER,
        GET_PROVIDERS,
        GET_ALL_PROVIDERS,
    )
}


def get_surface(signature: str) -> Optional[Surface]:
    """Look up a catalogued surface by its full signature."""
    return PLATFORM_SURFACES.get(signature)

