"""
Bid request models for the Kobler adapter.

A BidRequest is the host framework's view of one ad slot offered to Kobler.
It is created from the Prebid-style camelCase dictionary the host supplies
and is not modified by the adapter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, Union

Size = tuple[int, int]
FloorSize = Union[Size, str]


class MediaType(str, Enum):
    """Media types understood by the host framework."""

    BANNER = "banner"


@dataclass(frozen=True)
class FloorInfo:
    """Floor price and the currency it is denominated in."""

    floor: float
    currency: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FloorInfo":
        """Create from a floor-module style dictionary."""
        return cls(floor=data.get("floor", 0.0), currency=data.get("currency", ""))


class FloorQuery(Protocol):
    """
    Floor lookup capability offered by the host's price-floors module.

    Called with the resolved currency, the media type, and either a concrete
    (width, height) pair or the wildcard marker.
    """

    def __call__(self, currency: str, media_type: str, size: FloorSize) -> FloorInfo:
        ...


@dataclass(frozen=True)
class BidParams:
    """
    Kobler-specific parameters configured on an ad unit.

    Attributes:
        placement_id: Kobler placement the slot maps to (required)
        zip: Postal code hint for geo targeting
        test: Request test bids
        width, height: Size to use when the ad unit declares none
        position: Ad position (preferred over pos)
        pos: Legacy spelling of position
        bidfloor: Static floor price
        floorprice: Legacy spelling of bidfloor
        deal_id: Deal to target through PMP
    """

    placement_id: Optional[str] = None
    zip: Optional[str] = None
    test: Any = None
    width: Any = None
    height: Any = None
    position: Any = None
    pos: Any = None
    bidfloor: Any = None
    floorprice: Any = None
    deal_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidParams":
        """Create from the ad unit's params dictionary."""
        return cls(
            placement_id=data.get("placementId"),
            zip=data.get("zip"),
            test=data.get("test"),
            width=data.get("width"),
            height=data.get("height"),
            position=data.get("position"),
            pos=data.get("pos"),
            bidfloor=data.get("bidfloor"),
            floorprice=data.get("floorprice"),
            deal_id=data.get("dealId"),
        )


@dataclass(frozen=True)
class BidRequest:
    """
    One ad slot as handed to the adapter by the host framework.

    Attributes:
        bid_id: Host-assigned identifier, echoed back as imp.id / impid
        params: Kobler parameters, None when the ad unit has none
        banner_sizes: Sizes from mediaTypes.banner.sizes
        sizes: Legacy top-level sizes
        get_floor: Floor lookup, None when no floors module is active
    """

    bid_id: Optional[str] = None
    params: Optional[BidParams] = None
    banner_sizes: Optional[list[Size]] = None
    sizes: Optional[list[Size]] = None
    get_floor: Optional[FloorQuery] = field(default=None, compare=False)

    @property
    def has_floor_query(self) -> bool:
        """Check if the host exposes a floor lookup for this request."""
        return self.get_floor is not None

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        get_floor: Optional[FloorQuery] = None,
    ) -> "BidRequest":
        """
        Create from a Prebid-style bid request dictionary.

        Args:
            data: Dictionary with bidId, params, mediaTypes and sizes keys
            get_floor: Optional floor lookup to attach
        """
        params = data.get("params")
        banner = (data.get("mediaTypes") or {}).get("banner") or {}
        return cls(
            bid_id=data.get("bidId"),
            params=BidParams.from_dict(params) if params is not None else None,
            banner_sizes=_parse_sizes(banner.get("sizes")),
            sizes=_parse_sizes(data.get("sizes")),
            get_floor=get_floor,
        )


def _parse_sizes(raw: Any) -> Optional[list[Size]]:
    """Normalize [[w, h], ...] (or a single [w, h]) into a list of tuples."""
    if not isinstance(raw, (list, tuple)):
        return None
    if len(raw) == 2 and all(isinstance(v, (int, float)) for v in raw):
        raw = [raw]
    return [(size[0], size[1]) for size in raw]
