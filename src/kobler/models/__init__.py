"""Kobler adapter data models."""

from .auction_context import AuctionContext
from .bid_request import (
    BidParams,
    BidRequest,
    FloorInfo,
    FloorQuery,
    MediaType,
    Size,
)
from .bid_result import BidResult, ServerRequest, ServerResponse

__all__ = [
    'AuctionContext',
    'BidParams',
    'BidRequest',
    'BidResult',
    'FloorInfo',
    'FloorQuery',
    'MediaType',
    'ServerRequest',
    'ServerResponse',
    'Size',
]
