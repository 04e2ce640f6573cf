import ipaddress
import logging
import socket
from typing import Callable, Dict, List, Optional, Tuple

import psutil

logger = logging.getLogger(__name__)

AddressTable = Dict[str, List]


def select_ipv4(interfaces: AddressTable) -> Tuple[Optional[str], Optional[str]]:
    """Return (address, network) for the first non-loopback IPv4 address.

    Interfaces and their addresses are walked in the order they are given,
    which for psutil is whatever order the OS reports. Returns (None, None)
    when nothing qualifies.
    """
    for iface_name, iface_addresses in interfaces.items():
        for addr in iface_addresses:
            if addr.family != socket.AF_INET:
                continue
            try:
                # No netmask means a single host address
                interface = ipaddress.ip_interface(
                    f"{addr.address}/{addr.netmask}" if addr.netmask else addr.address
                )
            except ValueError:
                logger.debug(f"Skipping unparsable address {addr.address!r} on {iface_name}")
                continue
            if interface.ip.is_loopback:
                continue
            return str(interface.ip), str(interface.network)

    return None, None


def get_ip_address_and_network(
    addresses_lookup: Callable[[], AddressTable] = psutil.net_if_addrs,
) -> Tuple[Optional[str], Optional[str]]:
    """Enumerate local interface addresses and pick the primary IPv4 one."""
    try:
        interfaces = addresses_lookup()
    except (OSError, psutil.Error) as e:
        logger.warning(f"Failed to enumerate network interfaces: {e}")
        return None, None

    return select_ipv4(interfaces)
