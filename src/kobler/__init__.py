"""
Kobler bid adapter.

Translates host bid requests into Kobler's OpenRTB bid request and
Kobler's OpenRTB bid response back into host bid results.
"""

from .adapter import (
    build_requests,
    interpret_response,
    is_bid_request_valid,
    spec,
)
from .config import AdapterConfig
from .models import (
    AuctionContext,
    BidParams,
    BidRequest,
    BidResult,
    FloorInfo,
    ServerRequest,
    ServerResponse,
)

__version__ = '1.0.0'

__all__ = [
    'AdapterConfig',
    'AuctionContext',
    'BidParams',
    'BidRequest',
    'BidResult',
    'FloorInfo',
    'ServerRequest',
    'ServerResponse',
    'build_requests',
    'interpret_response',
    'is_bid_request_valid',
    'spec',
]
