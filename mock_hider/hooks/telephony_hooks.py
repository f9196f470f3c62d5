"""Wi-Fi and telephony hooks.

Blanking scan results and cell info keeps apps from correcting the spoofed
position through Wi-Fi or cell tower positioning.
"""
from typing import Any, List


def empty_collection(args: List, result: Any) -> Any:
    """WifiManager.getScanResults() / TelephonyManager.getAllCellInfo() -> []
    
    Always a fresh empty list, never null: some apps crash on a null
    getAllCellInfo().
    """
    return []


def null_result(args: List, result: Any) -> Any:
    """TelephonyManager.getCellLocation() -> null"""
    return None
