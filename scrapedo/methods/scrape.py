"""
Scraping functionality for the Scrape.do API.
"""

import logging
from typing import Optional
from ..types import ScrapeModifiers, ScrapeOptions, ScrapeResult, TransportDescriptor
from ..utils import (
    HttpClient,
    TransportFault,
    apply_screenshot_rules,
    build_proxy_url,
    build_transport_descriptor,
    handle_transport_fault,
    normalize_scrape_response,
)


def _prepare_scrape_request(
    client: HttpClient, options: ScrapeOptions, use_proxy: bool = False
) -> TransportDescriptor:
    """
    Prepare the transport descriptor for a scrape.

    Args:
        client: HTTP client instance (supplies token and API url)
        options: validated ScrapeOptions
        use_proxy: route the request through the proxy tunnel

    Returns:
        TransportDescriptor for direct-API or proxy mode
    """
    return build_transport_descriptor(client.api_key, options, use_proxy=use_proxy, api_url=client.api_url)


def scrape(
    client: HttpClient,
    options: ScrapeOptions,
    use_proxy: bool = False,
    logger: Optional[logging.Logger] = None,
) -> ScrapeResult:
    """
    Scrape a single URL and return the normalized result.

    Args:
        client: HTTP client instance
        options: validated scrape options
        use_proxy: proxy/tunnel mode instead of direct-API mode
        logger: per-call logger override

    Returns:
        ScrapeResult

    Raises:
        ScrapedoError: when the exchange fails, classified by status or timeout
    """
    log = logger or client.logger
    options = apply_screenshot_rules(options)
    log.debug(
        "Starting scrape request: url=%s use_proxy=%s render=%s super=%s device=%s",
        options.url, use_proxy, options.render, options.super, options.device,
    )

    descriptor = _prepare_scrape_request(client, options, use_proxy)
    try:
        response = client.execute(descriptor, logger=logger)
    except TransportFault as fault:
        log.error("Scrape request failed: %s", fault)
        handle_transport_fault(fault, "scrape")

    result = normalize_scrape_response(response, options)
    log.debug(
        "Scrape completed successfully: status=%s html=%s markdown=%s screenshot=%s",
        result.status_code, result.html is not None, result.markdown is not None, result.screenshot is not None,
    )
    return result


def generate_proxy_config(client: HttpClient, modifiers: ScrapeModifiers) -> str:
    """Proxy URI embedding the modifiers, for use with any HTTP client."""
    return build_proxy_url(client.api_key, modifiers)
