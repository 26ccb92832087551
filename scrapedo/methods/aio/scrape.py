import logging
from typing import Optional
from ...types import ScrapeOptions, ScrapeResult, TransportDescriptor
from ...utils.error_handler import TransportFault, handle_transport_fault
from ...utils.http_client_async import AsyncHttpClient
from ...utils.normalize import normalize_scrape_response
from ...utils.request_builder import build_transport_descriptor
from ...utils.validation import apply_screenshot_rules


async def _prepare_scrape_request(
    client: AsyncHttpClient, options: ScrapeOptions, use_proxy: bool = False
) -> TransportDescriptor:
    return build_transport_descriptor(client.api_key, options, use_proxy=use_proxy, api_url=client.api_url)


async def scrape(
    client: AsyncHttpClient,
    options: ScrapeOptions,
    use_proxy: bool = False,
    logger: Optional[logging.Logger] = None,
) -> ScrapeResult:
    log = logger or client.logger
    options = apply_screenshot_rules(options)
    log.debug("Starting scrape request: url=%s use_proxy=%s", options.url, use_proxy)
    descriptor = await _prepare_scrape_request(client, options, use_proxy)
    try:
        response = await client.execute(descriptor, logger=logger)
    except TransportFault as fault:
        log.error("Scrape request failed: %s", fault)
        handle_transport_fault(fault, "scrape")
    return normalize_scrape_response(response, options)
