#!/usr/bin/env python3
"""
Minimal examples for the Scrape.do client.
"""

import os
from dotenv import load_dotenv
from scrapedo import ScrapedoClient, ScrapedoError


load_dotenv()

def main():
    api_key = os.getenv("SCRAPEDO_API_KEY")
    if not api_key:
        raise ValueError("SCRAPEDO_API_KEY is not set")

    client = ScrapedoClient(api_key=api_key)

    # Plain scrape
    result = client.scrape("https://example.com")
    print("scrape:", result.status_code, len(result.html or ""))
    print(result.text[:200] if result.text else "")

    # Rendered page
    rendered = client.scrape_with_js("https://example.com", wait_selector="h1")
    print("rendered:", rendered.status_code)

    # Markdown
    md = client.scrape_to_markdown("https://example.com")
    print("markdown:", (md.markdown or "")[:200])

    # Proxy mode through the tunnel
    proxied = client.scrape_with_proxy("https://httpbin.org/ip", geo_code="us")
    print("proxy:", proxied.html)

    # Screenshot
    shot = client.take_screenshot("https://example.com", full_page=True)
    print("screenshot bytes (base64):", len(shot.screenshot or ""))

    # Local helpers
    print("estimated credits:", client.estimate_credits("https://www.linkedin.com/in/x", render=True))
    print("proxy config:", client.generate_proxy_config(super=True, geo_code="de"))

    # Usage
    try:
        stats = client.get_usage_stats()
        print("usage:", stats.model_dump())
    except ScrapedoError as e:
        print("usage failed:", e.to_dict())


if __name__ == "__main__":
    main()
