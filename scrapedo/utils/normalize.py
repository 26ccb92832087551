"""
Normalization of raw service responses into ScrapeResult.
"""

import json
import re
from typing import Any, List, Optional, Union
from ..types import RawResponse, ScrapeOptions, ScrapeResult

_TAG_RE = re.compile(r"<[^>]*>")


def extract_text(html: str) -> str:
    """Strip every tag from an HTML string and trim the surrounding whitespace."""
    return _TAG_RE.sub("", html).strip()


def _parse_json_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def _normalize_cookies(value: Optional[Union[str, List[str]]]) -> Optional[List[str]]:
    if not value:
        return None
    if isinstance(value, list):
        return value
    return [value]


def normalize_scrape_response(response: RawResponse, options: ScrapeOptions) -> ScrapeResult:
    """
    Interpret a successful response according to the requested output mode.

    Exactly one primary content field is populated, by precedence:
    transparent_response, return_json, markdown output, then html + text.

    Args:
        response: the raw response returned by the transport
        options: the options the request was built from

    Returns:
        ScrapeResult
    """
    result = ScrapeResult(
        status_code=response.status_code,
        url=options.url,
        headers=dict(response.headers),
    )

    if options.transparent_response:
        result.html = response.text
    elif options.return_json:
        data = _parse_json_body(response.text)
        result.network_data = data
        if isinstance(data, dict):
            if data.get("screenshot"):
                result.screenshot = data["screenshot"]
            if data.get("frames"):
                result.frames = data["frames"]
            if data.get("websockets"):
                result.websockets = data["websockets"]
    elif options.output == "markdown":
        result.markdown = response.text
    else:
        result.html = response.text
        result.text = extract_text(response.text)

    if options.pure_cookies:
        result.cookies = _normalize_cookies(response.headers.get("set-cookie"))

    return result
