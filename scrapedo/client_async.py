"""
Async client mirroring the regular client surface using true async HTTP transport.
"""

import logging
from typing import Optional
import httpx
from .types import ClientConfig, ScrapeModifiers, ScrapeResult, UsageStats
from .client import _resolve_api_key
from .utils.http_client_async import AsyncHttpClient
from .utils.credits import estimate_credits as estimate_credits_for
from .utils.request_builder import API_URL, build_proxy_url
from .utils.validation import apply_screenshot_rules, build_scrape_options, build_screenshot_options

from .methods.aio import scrape as async_scrape
from .methods.aio import usage as async_usage


class AsyncScrapedoClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = API_URL,
        verify_proxy_tls: bool = False,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        api_key = _resolve_api_key(api_key)
        self.config = ClientConfig(api_key=api_key, api_url=api_url, verify_proxy_tls=verify_proxy_tls)
        self.async_http_client = AsyncHttpClient(
            api_key, api_url, verify_proxy_tls=verify_proxy_tls, logger=logger, transport=transport
        )

    # Scrape
    async def scrape(
        self,
        url: str,
        *,
        use_proxy: bool = False,
        logger: Optional[logging.Logger] = None,
        **kwargs,
    ) -> ScrapeResult:
        options = build_scrape_options(url, **kwargs)
        return await async_scrape.scrape(self.async_http_client, options, use_proxy=use_proxy, logger=logger)

    async def scrape_with_js(self, url: str, *, width: int = 1920, height: int = 1080, **kwargs) -> ScrapeResult:
        kwargs["render"] = True
        return await self.scrape(url, width=width, height=height, **kwargs)

    async def scrape_with_proxy(self, url: str, **kwargs) -> ScrapeResult:
        kwargs["use_proxy"] = True
        return await self.scrape(url, **kwargs)

    async def scrape_to_markdown(self, url: str, **kwargs) -> ScrapeResult:
        kwargs["output"] = "markdown"
        return await self.scrape(url, **kwargs)

    async def take_screenshot(
        self,
        url: str,
        *,
        full_page: bool = False,
        selector: Optional[str] = None,
        use_proxy: bool = False,
        logger: Optional[logging.Logger] = None,
        **kwargs,
    ) -> ScrapeResult:
        options = build_screenshot_options(url, full_page=full_page, selector=selector, **kwargs)
        return await async_scrape.scrape(self.async_http_client, options, use_proxy=use_proxy, logger=logger)

    # Usage
    async def get_usage_stats(self) -> UsageStats:
        return await async_usage.get_usage_stats(self.async_http_client)

    # Local helpers, no I/O
    def estimate_credits(self, url: str, **kwargs) -> int:
        return estimate_credits_for(apply_screenshot_rules(build_scrape_options(url, **kwargs)))

    def generate_proxy_config(self, **kwargs) -> str:
        modifiers = ScrapeModifiers(**{k: v for k, v in kwargs.items() if v is not None})
        return build_proxy_url(self.config.api_key, modifiers)
