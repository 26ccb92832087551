"""
Utility modules for the Scrape.do client.
"""

from .http_client import HttpClient
from .error_handler import ScrapedoError, TransportFault, classify_transport_fault, handle_transport_fault
from .validation import build_scrape_options, apply_screenshot_rules, build_screenshot_options
from .credits import estimate_credits
from .normalize import normalize_scrape_response
from .request_builder import build_transport_descriptor, build_proxy_url

__all__ = [
    'HttpClient',
    'ScrapedoError',
    'TransportFault',
    'classify_transport_fault',
    'handle_transport_fault',
    'build_scrape_options',
    'apply_screenshot_rules',
    'build_screenshot_options',
    'estimate_credits',
    'normalize_scrape_response',
    'build_transport_descriptor',
    'build_proxy_url',
]
