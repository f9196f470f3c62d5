"""Configuration for the mock-location hiding hooks.

Users can customize these values to match the spoofing app and the target
device.
"""
from typing import Tuple


class HideMockConfig:
    """Configuration for the hook layer.
    
    Users can customize these values to match the spoofing app and the target
    device.
    """
    # Prefix of every hook log line
    tag: str = "HideMockHook"
    
    # Processes never hooked: the spoofing app itself and core system
    # processes. The phone process drives signal display.
    whitelist_packages: Tuple[str, ...] = (
        "com.cxorz.anywhere",
        "android",
        "com.android.systemui",
        "com.android.phone",
    )
    
    # Provider names left visible by getProviders()/getAllProviders()
    standard_providers: Tuple[str, ...] = ("gps", "network", "passive", "fused")
    
    # Location.getExtras() key set by test providers
    mock_extra_key: str = "mockLocation"
    
    # Settings.Secure name of the legacy "allow mock locations" switch
    mock_setting_name: str = "mock_location"
    mock_setting_masked: str = "0"
    
    # SDK version for Build.VERSION.SDK_INT
    sdk_int: int = 30  # Android 11
    
    # API levels that introduced the version-gated surfaces
    MOCK_API_SDK: int = 31  # Location.isMock()
    GNSS_API_SDK: int = 24  # LocationManager.registerGnssStatusCallback()


# Global config instance
hide_config = HideMockConfig()
