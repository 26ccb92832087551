"""
Main Scrape.do API client.

This module provides the client class that orchestrates request building,
transport, response normalization and error classification.

Usage:
    from scrapedo import ScrapedoClient
    client = ScrapedoClient(api_key="your-token")
    result = client.scrape("https://example.com")
"""

import logging
import os
from typing import Any, List, Optional, Union
from .types import (
    ClientConfig,
    DeviceOption,
    HttpMethod,
    OutputOption,
    RegionalGeoCode,
    ScrapeModifiers,
    ScrapeResult,
    UsageStats,
    WaitUntilOption,
)
from .utils.http_client import HttpClient
from .utils.credits import estimate_credits as estimate_credits_for
from .utils.request_builder import API_URL
from .utils.validation import apply_screenshot_rules, build_scrape_options, build_screenshot_options
from .methods import scrape as scrape_module
from .methods import usage as usage_methods


def _resolve_api_key(api_key: Optional[str]) -> str:
    if api_key is None:
        api_key = os.getenv("SCRAPEDO_API_KEY")
    if not api_key:
        raise ValueError(
            "API key is required. Set SCRAPEDO_API_KEY environment variable "
            "or pass api_key parameter."
        )
    return api_key


class ScrapedoClient:
    """
    Scrape.do API client.

    Every call is independent; the token is the only state shared between calls.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = API_URL,
        verify_proxy_tls: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the Scrape.do client.

        Args:
            api_key: Scrape.do token (or set SCRAPEDO_API_KEY env var)
            api_url: Base URL for the Scrape.do API
            verify_proxy_tls: Verify TLS certificates on the proxy tunnel. The
                service re-signs tunneled traffic, so this is off by default.
            logger: Logger used for outbound call logging (defaults to "scrapedo")
        """
        api_key = _resolve_api_key(api_key)
        self.config = ClientConfig(api_key=api_key, api_url=api_url, verify_proxy_tls=verify_proxy_tls)
        self.http_client = HttpClient(api_key, api_url, verify_proxy_tls=verify_proxy_tls, logger=logger)

    def scrape(
        self,
        url: str,
        *,
        use_proxy: bool = False,
        method: Optional[HttpMethod] = None,
        body: Optional[str] = None,
        render: Optional[bool] = None,
        device: Optional[DeviceOption] = None,
        wait_until: Optional[WaitUntilOption] = None,
        wait_selector: Optional[str] = None,
        custom_wait: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        block_resources: Optional[bool] = None,
        block_ads: Optional[bool] = None,
        super: Optional[bool] = None,
        geo_code: Optional[str] = None,
        regional_geo_code: Optional[RegionalGeoCode] = None,
        session_id: Optional[int] = None,
        custom_headers: Optional[bool] = None,
        extra_headers: Optional[bool] = None,
        forward_headers: Optional[bool] = None,
        set_cookies: Optional[str] = None,
        pure_cookies: Optional[bool] = None,
        screen_shot: Optional[bool] = None,
        full_screen_shot: Optional[bool] = None,
        particular_screen_shot: Optional[str] = None,
        output: Optional[OutputOption] = None,
        transparent_response: Optional[bool] = None,
        return_json: Optional[bool] = None,
        show_frames: Optional[bool] = None,
        show_websocket_requests: Optional[bool] = None,
        timeout: Optional[int] = None,
        retry_timeout: Optional[int] = None,
        disable_retry: Optional[bool] = None,
        disable_redirection: Optional[bool] = None,
        callback: Optional[str] = None,
        play_with_browser: Optional[Union[str, List[Any]]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> ScrapeResult:
        """
        Scrape a single URL and return the normalized result.
        Args:
            url: URL to scrape
            use_proxy: Send the request through the proxy tunnel instead of the API endpoint
            method: HTTP method (default GET)
            body: Request body for POST/PUT/DELETE
            render: Execute the page in a headless browser
            device: Device type to emulate
            wait_until: Wait condition for page load
            wait_selector: CSS selector to wait for before capturing
            custom_wait: Additional wait time in milliseconds
            width: Browser viewport width
            height: Browser viewport height
            block_resources: Block images, CSS and fonts
            block_ads: Block advertisements
            super: Use the residential and mobile proxy network
            geo_code: Country code for the proxy location
            regional_geo_code: Regional proxy location
            session_id: Sticky session ID (0-1000000) to keep the same IP
            custom_headers: Let the service add default headers
            extra_headers: Forward extra upstream headers
            forward_headers: Forward client headers to the target site
            set_cookies: Cookies to send to the target site
            pure_cookies: Return cookies exactly as sent by the target
            screen_shot: Capture a viewport screenshot
            full_screen_shot: Capture a full-page screenshot
            particular_screen_shot: Capture the element matching this CSS selector
            output: "raw" or "markdown"
            transparent_response: Return the origin response body untouched
            return_json: Return the service's JSON payload
            show_frames: Include iframe data (requires return_json)
            show_websocket_requests: Include websocket logs (requires return_json)
            timeout: Request timeout in milliseconds (5000-120000)
            retry_timeout: Retry timeout in milliseconds (5000-55000)
            disable_retry: Disable the service's automatic retries
            disable_redirection: Do not follow redirects
            callback: Webhook URL for asynchronous delivery
            play_with_browser: Browser automation script (JSON string or action list)
            logger: Logger for this call only
        Returns:
            ScrapeResult
        """
        options = build_scrape_options(
            url,
            method=method,
            body=body,
            render=render,
            device=device,
            wait_until=wait_until,
            wait_selector=wait_selector,
            custom_wait=custom_wait,
            width=width,
            height=height,
            block_resources=block_resources,
            block_ads=block_ads,
            super=super,
            geo_code=geo_code,
            regional_geo_code=regional_geo_code,
            session_id=session_id,
            custom_headers=custom_headers,
            extra_headers=extra_headers,
            forward_headers=forward_headers,
            set_cookies=set_cookies,
            pure_cookies=pure_cookies,
            screen_shot=screen_shot,
            full_screen_shot=full_screen_shot,
            particular_screen_shot=particular_screen_shot,
            output=output,
            transparent_response=transparent_response,
            return_json=return_json,
            show_frames=show_frames,
            show_websocket_requests=show_websocket_requests,
            timeout=timeout,
            retry_timeout=retry_timeout,
            disable_retry=disable_retry,
            disable_redirection=disable_redirection,
            callback=callback,
            play_with_browser=play_with_browser,
        )
        return scrape_module.scrape(self.http_client, options, use_proxy=use_proxy, logger=logger)

    def scrape_with_js(self, url: str, *, width: int = 1920, height: int = 1080, **kwargs) -> ScrapeResult:
        """Scrape a JavaScript-rendered page using the headless browser."""
        kwargs["render"] = True
        return self.scrape(url, width=width, height=height, **kwargs)

    def scrape_with_proxy(self, url: str, **kwargs) -> ScrapeResult:
        """Scrape through the proxy tunnel; the target is requested directly via the proxy."""
        kwargs["use_proxy"] = True
        return self.scrape(url, **kwargs)

    def scrape_to_markdown(self, url: str, **kwargs) -> ScrapeResult:
        """Scrape and let the service convert the page to markdown."""
        kwargs["output"] = "markdown"
        return self.scrape(url, **kwargs)

    def take_screenshot(
        self,
        url: str,
        *,
        full_page: bool = False,
        selector: Optional[str] = None,
        use_proxy: bool = False,
        logger: Optional[logging.Logger] = None,
        **kwargs,
    ) -> ScrapeResult:
        """
        Capture a screenshot of the viewport, the full page, or one element.

        Args:
            url: URL to capture
            full_page: Capture the full page
            selector: CSS selector of the element to capture
            use_proxy: Send the request through the proxy tunnel
            logger: Logger for this call only
            **kwargs: Any other scrape modifier

        Returns:
            ScrapeResult with the base64 screenshot in ``screenshot``
        """
        options = build_screenshot_options(url, full_page=full_page, selector=selector, **kwargs)
        return scrape_module.scrape(self.http_client, options, use_proxy=use_proxy, logger=logger)

    def get_usage_stats(self) -> UsageStats:
        """Get remaining credits, used credits, concurrency limit and today's request count."""
        return usage_methods.get_usage_stats(self.http_client)

    def estimate_credits(self, url: str, **kwargs) -> int:
        """Estimate the credit cost of a scrape without sending it."""
        return estimate_credits_for(apply_screenshot_rules(build_scrape_options(url, **kwargs)))

    def generate_proxy_config(self, **kwargs) -> str:
        """Proxy URI carrying the given modifiers, usable with any HTTP client."""
        modifiers = ScrapeModifiers(**{k: v for k, v in kwargs.items() if v is not None})
        return scrape_module.generate_proxy_config(self.http_client, modifiers)


__all__ = ['ScrapedoClient']
