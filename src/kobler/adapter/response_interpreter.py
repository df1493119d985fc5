"""Response Interpreter for the Kobler adapter."""

from ..logging import adapter_logger
from ..models.bid_result import BidResult, ServerResponse
from ..utils.constants import BIDDER_CODE, TIME_TO_LIVE_IN_SECONDS

logger = adapter_logger()


def interpret_response(server_response: ServerResponse) -> list[BidResult]:
    """
    Turn an OpenRTB bid response into bid results.

    Emits one result per bid, seat by seat. A missing body gives no bids;
    a body without seatbid/bid lists raises whatever the lookup raises.

    Args:
        server_response: Response wrapper from the host

    Returns:
        List of BidResult in response order
    """
    res = server_response.body
    bids: list[BidResult] = []
    if not res:
        return bids

    for seat_bid in res["seatbid"]:
        for bid in seat_bid["bid"]:
            bids.append(
                BidResult(
                    request_id=bid.get("impid"),
                    cpm=bid.get("price"),
                    currency=res.get("cur"),
                    width=bid.get("w"),
                    height=bid.get("h"),
                    creative_id=bid.get("crid"),
                    deal_id=bid.get("dealid"),
                    net_revenue=True,
                    ttl=TIME_TO_LIVE_IN_SECONDS,
                    ad=bid.get("adm"),
                    advertiser_domains=bid.get("adomain"),
                )
            )

    logger.debug("Interpreted bid response", bidder=BIDDER_CODE, bids=len(bids))
    return bids
