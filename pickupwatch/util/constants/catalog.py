PRODUCT_LINE = "iPhone 15 Pro MAX"

# Locations, in search priority order
CHICAGO = "Chicago, IL"
NEW_YORK = "New York, NY"
PORTLAND = "Portland, OR"
LOCATIONS = [CHICAGO, NEW_YORK, PORTLAND]

# Vendor part numbers
BLUE_TITANIUM_IPHONE_15_PRO_MAX_256 = "MU693LL/A"
BLUE_TITANIUM_IPHONE_15_PRO_MAX_512 = "MU6E3LL/A"
BLUE_TITANIUM_IPHONE_15_PRO_MAX_1024 = "MU6J3LL/A"
VARIANTS = [
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_256,
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_512,
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_1024,
]

PRODUCT_NAMES = {
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_256:
        "iPhone 15 Pro Max 256GB Blue Titanium",
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_512:
        "iPhone 15 Pro Max 512GB Blue Titanium",
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_1024:
        "iPhone 15 Pro Max 1024GB Blue Titanium",
}
STORAGE_LABELS = {
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_256: "256gb",
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_512: "512gb",
    BLUE_TITANIUM_IPHONE_15_PRO_MAX_1024: "1tb",
}
DEFAULT_PRODUCT_NAME = "iPhone 15 Pro"
DEFAULT_STORAGE_LABEL = "512gb"

# Courtesy delay between vendor requests
DEFAULT_REQUEST_DELAY_SECONDS = 0.3
REQUEST_DELAY_ENV_KEY = "REQUEST_DELAY_SECONDS"

NO_AVAILABILITY_MESSAGE = (
    f"No stores with {PRODUCT_LINE} available at the moment"
)
