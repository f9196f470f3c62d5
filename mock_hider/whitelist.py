"""Process whitelist: identities that are never hooked."""
from typing import Iterable, Optional

from .config import hide_config


def is_exempt(process_identity: Optional[str], whitelist: Optional[Iterable[str]] = None) -> bool:
    """Return True iff process_identity exactly matches a whitelist entry."""
    if whitelist is None:
        whitelist = hide_config.whitelist_packages
    return process_identity in tuple(whitelist)
