"""Bid request validation."""

from typing import Optional

from ..models.bid_request import BidRequest


def is_bid_request_valid(bid: Optional[BidRequest]) -> bool:
    """
    Check that a bid request carries the fields Kobler needs.

    Invalid requests are dropped by the caller; nothing is raised.

    Args:
        bid: Candidate bid request, may be None

    Returns:
        True if the request has a bid id, params and a placement id
    """
    if bid is None or bid.params is None:
        return False
    return bool(bid.bid_id and bid.params.placement_id)
