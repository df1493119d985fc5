"""Outbound request descriptor and normalized bid results."""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..utils.constants import CONTENT_TYPE, HTTP_METHOD


@dataclass(frozen=True)
class ServerRequest:
    """
    HTTP request descriptor handed back to the host for dispatch.

    Attributes:
        url: Endpoint URL
        data: Serialized OpenRTB bid request
        method: HTTP method
        options: Transport options understood by the host
    """

    url: str
    data: str
    method: str = HTTP_METHOD
    options: dict[str, Any] = field(
        default_factory=lambda: {"contentType": CONTENT_TYPE}
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "method": self.method,
            "url": self.url,
            "data": self.data,
            "options": dict(self.options),
        }


@dataclass(frozen=True)
class ServerResponse:
    """HTTP response wrapper as delivered by the host."""

    body: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerResponse":
        """Create from a host response dictionary."""
        return cls(body=data.get("body"))


@dataclass
class BidResult:
    """
    A single bid normalized for the host auction.

    Attributes:
        request_id: bid_id of the BidRequest this bid answers
        cpm: Bid price
        currency: Currency of the whole response
        width, height: Creative dimensions
        creative_id: Creative identifier
        deal_id: Deal the bid was made under, if any
        net_revenue: Whether cpm is net of fees
        ttl: Seconds the bid stays valid
        ad: Creative markup
        advertiser_domains: Advertiser domains for blocking/reporting
    """

    request_id: Optional[str]
    cpm: Optional[float]
    currency: Optional[str]
    width: Optional[int]
    height: Optional[int]
    creative_id: Optional[str]
    deal_id: Optional[str]
    net_revenue: bool
    ttl: int
    ad: Optional[str]
    advertiser_domains: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's camelCase bid response shape."""
        return {
            "requestId": self.request_id,
            "cpm": self.cpm,
            "currency": self.currency,
            "width": self.width,
            "height": self.height,
            "creativeId": self.creative_id,
            "dealId": self.deal_id,
            "netRevenue": self.net_revenue,
            "ttl": self.ttl,
            "ad": self.ad,
            "meta": {
                "advertiserDomains": self.advertiser_domains,
            },
        }
