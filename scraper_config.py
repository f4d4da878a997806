"""
Configuration settings for the bowling ball scraper.
"""

# Site origin - every item link is resolved against this
HOST = "https://www.bowlingball.com"

# Listing page holding every bowling ball on a single page
SHOPPING_PAGE = "/shop/all/bowling-balls/?ft1=a&limit=999999"

# CSS selector for one product entry on the listing page
LISTING_CONTAINER_CSS = "div.product_info_block"

# CSV destination, overwritten on every run
OUTPUT_PATH = "output/balls.csv"

# Maximum number of item pages fetched at the same time
# Lower this if the site starts refusing connections
MAX_WORKERS = 8

# Per-request timeout in seconds
REQUEST_TIMEOUT = 30

# Number of attempts for a failed request
MAX_RETRIES = 3

# Retry delay in seconds
RETRY_DELAY = 5

# Browser fingerprint used by curl_cffi
IMPERSONATE = "chrome120"
