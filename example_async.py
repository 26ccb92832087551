#!/usr/bin/env python3
"""
Concurrent scrapes with the async client.
"""

import asyncio
import os
from dotenv import load_dotenv
from scrapedo import AsyncScrapedoClient, ScrapedoError


load_dotenv()

async def main():
    api_key = os.getenv("SCRAPEDO_API_KEY")
    if not api_key:
        raise ValueError("SCRAPEDO_API_KEY is not set")

    client = AsyncScrapedoClient(api_key=api_key)
    urls = ["https://example.com", "https://httpbin.org/html", "https://httpbin.org/ip"]

    results = await asyncio.gather(*(client.scrape(u) for u in urls), return_exceptions=True)
    for url, result in zip(urls, results):
        if isinstance(result, ScrapedoError):
            print(url, "failed:", result.error_type, "retryable" if result.retryable else "final")
        elif isinstance(result, Exception):
            raise result
        else:
            print(url, result.status_code, len(result.html or ""))

    stats = await client.get_usage_stats()
    print("remaining credits:", stats.remaining_credits)


if __name__ == "__main__":
    asyncio.run(main())
