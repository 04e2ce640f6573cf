import platform
import socket
from typing import Callable

import psutil

from serverinfo.hwosinfo.models import ServerInfo
from serverinfo.hwosinfo.net import AddressTable, get_ip_address_and_network
from serverinfo.hwosinfo.os import get_hostname, get_platform


class HostInfoCollector:
    """Gathers a ServerInfo snapshot from the local environment.

    The underlying OS calls are plain callables so they can be swapped out.
    A failing call degrades only its own fields; collect() never raises.
    """

    def __init__(
        self,
        hostname_lookup: Callable[[], str] = socket.gethostname,
        platform_lookup: Callable[[], str] = platform.system,
        addresses_lookup: Callable[[], AddressTable] = psutil.net_if_addrs,
    ):
        self.hostname_lookup = hostname_lookup
        self.platform_lookup = platform_lookup
        self.addresses_lookup = addresses_lookup

    def collect(self) -> ServerInfo:
        ip_address, network = get_ip_address_and_network(self.addresses_lookup)
        return ServerInfo.from_lookups(
            hostname=get_hostname(self.hostname_lookup),
            os=get_platform(self.platform_lookup),
            ip_address=ip_address,
            network=network,
        )


def collect() -> ServerInfo:
    """Collect a snapshot using the default system lookups."""
    return HostInfoCollector().collect()
