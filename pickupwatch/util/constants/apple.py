# Fulfillment endpoint
FULFILLMENT_MESSAGES_URL = "https://www.apple.com/shop/fulfillment-messages"
FULFILLMENT_BASE_PARAMS = {
    "pl": "true",
    "mts.0": "regular",
    "mts.1": "compact",
    "cppart": "UNLOCKED/US",
}
PART_PARAM = "parts.0"
LOCATION_PARAM = "location"

# Pickup display flags
AVAILABLE = "available"

# Purchase page
BUY_PAGE_URL = (
    "https://www.apple.com/shop/buy-iphone/iphone-15-pro/"
    "6.7-inch-display-{storage}-blue-titanium-unlocked"
)
STORE_NAME_PREFIX = "Apple"
