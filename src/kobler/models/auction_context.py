"""Auction context shared by all bid requests in one call."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class AuctionContext:
    """
    Per-auction values supplied by the host framework.

    Attributes:
        auction_id: Host auction identifier, sent as the OpenRTB request id
        timeout: Auction timeout in milliseconds
        referer: Page URL detected by the host's referer logic
    """

    auction_id: Optional[str] = None
    timeout: Optional[int] = None
    referer: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuctionContext":
        """Create from a Prebid-style bidderRequest dictionary."""
        referer_info = data.get("refererInfo") or {}
        return cls(
            auction_id=data.get("auctionId"),
            timeout=data.get("timeout"),
            referer=referer_info.get("referer"),
        )
