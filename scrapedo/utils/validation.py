"""
Shared validation functions for the Scrape.do client.
"""

from typing import Any, Dict, Optional
from ..types import ScrapeOptions


def build_scrape_options(url: str, **kwargs: Any) -> ScrapeOptions:
    """
    Validate a url and keyword modifiers in a single schema pass.

    None values are treated as unset.

    Raises:
        ValueError: If the url is empty or any option is invalid
    """
    if not url or not url.strip():
        raise ValueError("URL cannot be empty")
    return ScrapeOptions(url=url, **{k: v for k, v in kwargs.items() if v is not None})


def apply_screenshot_rules(options: ScrapeOptions) -> ScrapeOptions:
    """
    Screenshots are only produced by a rendered browser and only delivered in
    the JSON payload, so any screenshot flag forces render and return_json.
    Resources stay unblocked unless the caller asked otherwise.
    """
    if not options.active_screenshot_fields():
        return options

    updates: Dict[str, Any] = {"render": True, "return_json": True}
    if options.block_resources is None:
        updates["block_resources"] = False
    return options.model_copy(update=updates)


def build_screenshot_options(
    url: str,
    full_page: bool = False,
    selector: Optional[str] = None,
    **kwargs: Any,
) -> ScrapeOptions:
    """
    Options for a screenshot capture.

    Args:
        url: page to capture
        full_page: capture the whole page instead of the viewport
        selector: CSS selector of a single element to capture
        **kwargs: any other scrape modifiers

    Raises:
        ValueError: If both full_page and selector are given

    Screenshot flags, render, return_json and block_resources in kwargs are
    overridden.
    """
    if full_page and selector:
        raise ValueError("Please choose either full_page or selector screenshot mode, not both")

    overridden = ("screen_shot", "full_screen_shot", "particular_screen_shot", "render", "return_json", "block_resources")
    for name in overridden:
        kwargs.pop(name, None)

    options = build_scrape_options(
        url,
        screen_shot=True if not full_page and not selector else None,
        full_screen_shot=True if full_page else None,
        particular_screen_shot=selector,
        block_resources=False,
        **kwargs,
    )
    return apply_screenshot_rules(options)
