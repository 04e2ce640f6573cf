import logging
import platform
import socket
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def get_hostname(hostname_lookup: Callable[[], str] = socket.gethostname) -> Optional[str]:
    """Return the OS-reported host name, or None if it cannot be read."""
    try:
        return hostname_lookup() or None
    except (OSError, UnicodeError) as e:
        logger.warning(f"Failed to read hostname: {e}")
        return None


def get_platform(platform_lookup: Callable[[], str] = platform.system) -> Optional[str]:
    """Return the lower-cased platform identifier, e.g. "linux" or "darwin"."""
    try:
        system = platform_lookup()
    except (OSError, UnicodeError) as e:
        logger.warning(f"Failed to read platform: {e}")
        return None
    if not system:
        return None
    return system.lower()
