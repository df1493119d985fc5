"""
Request Builder for the Kobler adapter.

Translates validated bid requests and the auction context into a single
OpenRTB 2.x bid request and wraps it in a ServerRequest descriptor.
Nothing is sent from here; dispatch belongs to the host.
"""

import json
import re
from typing import Any, Optional, Sequence

from ..config.adapter_config import AdapterConfig, get_adapter_config
from ..logging import LogContext, adapter_logger
from ..models.auction_context import AuctionContext
from ..models.bid_request import BidRequest, FloorInfo, MediaType, Size
from ..models.bid_result import ServerRequest
from ..utils.constants import (
    AUCTION_TYPE,
    BIDDER_CODE,
    BIDDER_ENDPOINT,
    DEFAULT_CURRENCY,
    DEFAULT_TIMEOUT,
    WILDCARD_SIZE,
)
from ..utils.user_agent import get_device_type

logger = adapter_logger()

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def build_requests(
    valid_bid_requests: Sequence[BidRequest],
    context: AuctionContext,
    config: Optional[AdapterConfig] = None,
) -> ServerRequest:
    """
    Build the outbound request for a set of validated bid requests.

    Args:
        valid_bid_requests: Bid requests that passed is_bid_request_valid
        context: Per-auction values from the host
        config: Host settings (uses the global config if not provided)

    Returns:
        ServerRequest with the serialized OpenRTB payload

    Raises:
        ValueError: If no bid requests are given
    """
    config = config or get_adapter_config()

    with LogContext(bidder=BIDDER_CODE, auction_id=context.auction_id):
        payload = build_open_rtb_payload(valid_bid_requests, context, config)
        logger.debug(
            "Built bid request",
            impressions=len(payload["imp"]),
            device_type=payload["device"]["devicetype"],
            test=payload["test"],
        )

    return ServerRequest(url=BIDDER_ENDPOINT, data=json.dumps(payload))


def build_open_rtb_payload(
    valid_bid_requests: Sequence[BidRequest],
    context: AuctionContext,
    config: AdapterConfig,
) -> dict[str, Any]:
    """
    Build the OpenRTB bid request dictionary.

    One imp is produced per bid request, in input order. Geo and the test
    flag are taken from the first bid request.
    """
    if not valid_bid_requests:
        raise ValueError("At least one valid bid request is required")

    currency = get_currency(config)
    imps = [build_imp(bid, currency) for bid in valid_bid_requests]
    first = valid_bid_requests[0]

    return {
        "id": context.auction_id,
        "at": AUCTION_TYPE,
        "tmax": get_timeout(context, config),
        "cur": [currency],
        "imp": imps,
        "device": {
            "devicetype": get_device_type(config.user_agent),
            "geo": get_geo(first),
        },
        "site": {
            "page": get_page_url(context, config),
        },
        "test": get_test(first, config),
    }


def build_imp(bid: BidRequest, currency: str) -> dict[str, Any]:
    """Build the OpenRTB imp object for one bid request."""
    sizes = get_sizes(bid)
    main_size = sizes[0]
    floor_info = get_floor_info(bid, main_size, currency)

    return {
        "id": bid.bid_id,
        "banner": {
            "format": [{"w": w, "h": h} for w, h in sizes],
            "w": main_size[0],
            "h": main_size[1],
            "pos": get_position(bid),
        },
        "tagid": bid.params.placement_id,
        "bidfloor": floor_info.floor,
        "bidfloorcur": floor_info.currency,
        "pmp": build_pmp(bid),
    }


def get_timeout(context: AuctionContext, config: AdapterConfig) -> int:
    """Auction timeout, then global bidder timeout, then the default."""
    return context.timeout or config.bidder_timeout or DEFAULT_TIMEOUT


def get_page_url(context: AuctionContext, config: AdapterConfig) -> Optional[str]:
    """Referer detected by the host, falling back to the current page."""
    return context.referer or config.page_location


def get_currency(config: AdapterConfig) -> str:
    """Ad server currency, falling back to USD."""
    return config.ad_server_currency or DEFAULT_CURRENCY


def get_geo(bid: BidRequest) -> dict[str, Any]:
    """Geo block with the postal code, empty if none was configured."""
    if bid.params and bid.params.zip:
        return {"zip": bid.params.zip}
    return {}


def get_test(bid: BidRequest, config: AdapterConfig) -> int:
    """1 if the bid asks for test bids or the host is in debug mode."""
    return 1 if (bid.params and bid.params.test) or config.debug else 0


def get_sizes(bid: BidRequest) -> list[Size]:
    """
    Resolve the sizes to offer for a bid request.

    Prefers mediaTypes.banner.sizes, then the legacy sizes field. An empty
    banner size list also falls through to the legacy field; Prebid.js
    adapters written in JS treat an empty array as present and skip
    straight to the params. When neither has entries, a single size is
    built from the width/height params, each defaulting to 0.
    """
    sizes = bid.banner_sizes or bid.sizes
    if sizes:
        return list(sizes)

    width = bid.params.width if bid.params.width else 0
    height = bid.params.height if bid.params.height else 0
    return [(width, height)]


def get_position(bid: BidRequest) -> int:
    """Integer position param, then pos, then 0."""
    return parse_int(bid.params.position) or parse_int(bid.params.pos) or 0


def get_floor_info(bid: BidRequest, main_size: Size, currency: str) -> FloorInfo:
    """
    Resolve the floor for an imp.

    Uses the host floor lookup when one is attached, asking for any size
    when the main size has no width. Otherwise falls back to the static
    bidfloor / floorprice params.
    """
    if bid.has_floor_query:
        size = WILDCARD_SIZE if main_size[0] == 0 else main_size
        floor_info = bid.get_floor(
            currency=currency,
            media_type=MediaType.BANNER.value,
            size=size,
        )
        if isinstance(floor_info, dict):
            floor_info = FloorInfo.from_dict(floor_info)
        return floor_info

    return FloorInfo(
        floor=bid.params.bidfloor or bid.params.floorprice or 0.0,
        currency=currency,
    )


def build_pmp(bid: BidRequest) -> dict[str, Any]:
    """PMP block targeting the configured deal, empty if none."""
    if bid.params.deal_id:
        return {
            "deals": [
                {
                    "id": bid.params.deal_id,
                }
            ]
        }
    return {}


def parse_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value.

    "3", "3px", 3 and 3.7 all give 3. Returns None when there is no
    leading integer.
    """
    if value is None or isinstance(value, bool):
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None
