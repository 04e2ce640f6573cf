from typing import Optional
from pydantic import BaseModel, ConfigDict

UNKNOWN = "unknown"


class ServerInfo(BaseModel):
    """Host identity snapshot, built fresh for every request."""

    model_config = ConfigDict(frozen=True)

    hostname: str
    os: str
    ip_address: str
    network: str

    @classmethod
    def from_lookups(
        cls,
        hostname: Optional[str],
        os: Optional[str],
        ip_address: Optional[str],
        network: Optional[str],
    ) -> "ServerInfo":
        """Build a snapshot, substituting "unknown" for unavailable values."""
        return cls(
            hostname=hostname or UNKNOWN,
            os=os or UNKNOWN,
            ip_address=ip_address or UNKNOWN,
            network=network or UNKNOWN,
        )
