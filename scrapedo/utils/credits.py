"""
Local credit cost estimate for a scrape request.

The service is the authority on billing; this only mirrors its published
pricing tiers so callers can budget before sending anything.
"""

from ..types import ScrapeOptions

BASE_CREDITS = 1
RENDER_CREDITS = 5
SUPER_CREDITS = 10
SUPER_RENDER_CREDITS = 25

# Minimum cost for domains the service prices separately (substring, lower-cased url)
DOMAIN_FLOORS = (
    ("google.", 10),
    ("linkedin.com", 30),
)


def estimate_credits(options: ScrapeOptions) -> int:
    """
    Estimate how many credits a request will consume.

    Args:
        options: the scrape request

    Returns:
        Estimated credit cost, never lower than the domain floor for the url
    """
    if options.super and options.render:
        credits = SUPER_RENDER_CREDITS
    elif options.super:
        credits = SUPER_CREDITS
    elif options.render:
        credits = RENDER_CREDITS
    else:
        credits = BASE_CREDITS

    url = options.url.lower()
    for needle, floor in DOMAIN_FLOORS:
        if needle in url:
            credits = max(credits, floor)

    return credits
