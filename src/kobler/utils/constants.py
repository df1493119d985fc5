"""Kobler adapter constants."""

BIDDER_CODE: str = "kobler"

# Endpoint
BIDDER_ENDPOINT: str = "https://bid.essrtb.com/bid/prebid_rtb_call"
HTTP_METHOD: str = "POST"
CONTENT_TYPE: str = "application/json"

# Defaults used when neither the auction nor the config supplies a value
DEFAULT_CURRENCY: str = "USD"
DEFAULT_TIMEOUT: int = 1000  # milliseconds
TIME_TO_LIVE_IN_SECONDS: int = 10 * 60

# OpenRTB auction type (1 = first price)
AUCTION_TYPE: int = 1

# OpenRTB device.devicetype values
DEVICE_TYPE_PERSONAL_COMPUTER: int = 2
DEVICE_TYPE_PHONE: int = 4
DEVICE_TYPE_TABLET: int = 5

# Floor lookups for an unknown size
WILDCARD_SIZE: str = "*"
