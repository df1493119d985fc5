"""
Bidder spec and registry.

A BidderSpec bundles a bidder's code, supported media types and its
three adapter operations. Specs are registered by code so the host can
look an adapter up by name.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from ..config.adapter_config import AdapterConfig
from ..logging import get_logger
from ..models.auction_context import AuctionContext
from ..models.bid_request import BidRequest, MediaType
from ..models.bid_result import BidResult, ServerRequest, ServerResponse
from ..utils.constants import BIDDER_CODE
from .request_builder import build_requests
from .response_interpreter import interpret_response
from .validator import is_bid_request_valid

logger = get_logger("kobler.registry")


class BidderRegistryError(Exception):
    """Base exception for bidder registry errors."""
    pass


class BidderNotFoundError(BidderRegistryError):
    """Raised when a bidder code is not registered."""
    pass


class BidderAlreadyRegisteredError(BidderRegistryError):
    """Raised when registering a code that is already taken."""
    pass


@dataclass(frozen=True)
class BidderSpec:
    """
    Adapter operations for one bidder.

    Attributes:
        code: Bidder code used in ad unit configuration
        is_bid_request_valid: Validator for candidate bid requests
        build_requests: Builds the outbound request descriptor
        interpret_response: Turns the HTTP response into bid results
        supported_media_types: Media types the bidder can serve
    """

    code: str
    is_bid_request_valid: Callable[[Optional[BidRequest]], bool]
    build_requests: Callable[..., ServerRequest]
    interpret_response: Callable[[ServerResponse], list[BidResult]]
    supported_media_types: list[MediaType] = field(
        default_factory=lambda: [MediaType.BANNER]
    )

    def filter_valid(self, bids: Iterable[Optional[BidRequest]]) -> list[BidRequest]:
        """Drop bid requests the validator rejects, keeping order."""
        valid = []
        for bid in bids:
            if self.is_bid_request_valid(bid):
                valid.append(bid)
            else:
                logger.debug(
                    "Dropped invalid bid request",
                    bidder=self.code,
                    bid_id=bid.bid_id if bid is not None else None,
                )
        return valid

    def build(
        self,
        bids: Iterable[Optional[BidRequest]],
        context: AuctionContext,
        config: Optional[AdapterConfig] = None,
    ) -> Optional[ServerRequest]:
        """
        Validate, then build.

        Returns None when no bid request survives validation.
        """
        valid = self.filter_valid(bids)
        if not valid:
            return None
        return self.build_requests(valid, context, config)


# Registered specs keyed by bidder code
_registry: dict[str, BidderSpec] = {}


def register_bidder(spec: BidderSpec) -> BidderSpec:
    """
    Register a bidder spec.

    Raises:
        BidderAlreadyRegisteredError: If the code is already registered
    """
    if spec.code in _registry:
        raise BidderAlreadyRegisteredError(
            f"Bidder '{spec.code}' is already registered"
        )
    _registry[spec.code] = spec
    logger.debug(
        "Registered bidder",
        bidder=spec.code,
        media_types=[m.value for m in spec.supported_media_types],
    )
    return spec


def unregister_bidder(code: str) -> None:
    """
    Remove a bidder spec.

    Raises:
        BidderNotFoundError: If the code is not registered
    """
    if _registry.pop(code, None) is None:
        raise BidderNotFoundError(f"Bidder '{code}' not found")
    logger.debug("Unregistered bidder", bidder=code)


def get_bidder(code: str) -> BidderSpec:
    """
    Look up a registered bidder spec.

    Raises:
        BidderNotFoundError: If the code is not registered
    """
    try:
        return _registry[code]
    except KeyError:
        raise BidderNotFoundError(f"Bidder '{code}' not found") from None


def list_bidders() -> Sequence[str]:
    """Codes of all registered bidders."""
    return sorted(_registry)


spec = BidderSpec(
    code=BIDDER_CODE,
    is_bid_request_valid=is_bid_request_valid,
    build_requests=build_requests,
    interpret_response=interpret_response,
    supported_media_types=[MediaType.BANNER],
)

register_bidder(spec)
