"""
Kobler bid adapter.

Components:
- validator.py: is_bid_request_valid
- request_builder.py: build_requests and the field mapping helpers
- response_interpreter.py: interpret_response
- bidder_spec.py: BidderSpec and the bidder registry

Usage:
    from src.kobler.adapter import spec

    valid = spec.filter_valid(bid_requests)
    request = spec.build_requests(valid, context)
    bids = spec.interpret_response(response)
"""

from .request_builder import build_open_rtb_payload, build_requests
from .response_interpreter import interpret_response
from .bidder_spec import (
    BidderAlreadyRegisteredError,
    BidderNotFoundError,
    BidderRegistryError,
    BidderSpec,
    get_bidder,
    list_bidders,
    register_bidder,
    spec,
    unregister_bidder,
)
from .validator import is_bid_request_valid

__all__ = [
    "BidderAlreadyRegisteredError",
    "BidderNotFoundError",
    "BidderRegistryError",
    "BidderSpec",
    "build_open_rtb_payload",
    "build_requests",
    "get_bidder",
    "interpret_response",
    "is_bid_request_valid",
    "list_bidders",
    "register_bidder",
    "spec",
    "unregister_bidder",
]
