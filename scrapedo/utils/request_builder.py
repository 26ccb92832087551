"""
Request construction for the two ways of reaching the service.

Direct-API mode puts the token, the target and the modifiers in the query
string of the API endpoint. Proxy mode puts the modifiers in the password of
a forward-proxy URI and requests the target itself through that proxy.
"""

import json
from typing import Any, List, Tuple
from urllib.parse import urlencode
from ..types import ScrapeModifiers, ScrapeOptions, TransportDescriptor

API_URL = "https://api.scrape.do"
PROXY_HOST = "proxy.scrape.do"
PROXY_PORT = 8080
DEFAULT_TIMEOUT_MS = 60000
DEFAULT_MAX_REDIRECTS = 5
BODY_METHODS = ("POST", "PUT", "DELETE")

# snake_case option name -> parameter name understood by the service
FIELD_MAPPINGS = {
    "geo_code": "geoCode",
    "regional_geo_code": "regionalGeoCode",
    "session_id": "sessionId",
    "custom_headers": "customHeaders",
    "extra_headers": "extraHeaders",
    "forward_headers": "forwardHeaders",
    "set_cookies": "setCookies",
    "pure_cookies": "pureCookies",
    "wait_until": "waitUntil",
    "custom_wait": "customWait",
    "wait_selector": "waitSelector",
    "block_resources": "blockResources",
    "block_ads": "blockAds",
    "screen_shot": "screenShot",
    "full_screen_shot": "fullScreenShot",
    "particular_screen_shot": "particularScreenShot",
    "disable_redirection": "disableRedirection",
    "retry_timeout": "retryTimeout",
    "disable_retry": "disableRetry",
    "transparent_response": "transparentResponse",
    "return_json": "returnJSON",
    "show_frames": "showFrames",
    "show_websocket_requests": "showWebsocketRequests",
    "play_with_browser": "playWithBrowser",
}

# Parameters forwarded to the service. Anything else (url, method, body) is
# consumed locally and never serialized.
ALLOWED_PARAMETERS = frozenset([
    "render", "super", "geoCode", "regionalGeoCode", "sessionId",
    "customHeaders", "extraHeaders", "forwardHeaders", "setCookies", "pureCookies",
    "device", "waitUntil", "customWait", "waitSelector", "width", "height",
    "blockResources", "blockAds", "screenShot", "fullScreenShot", "particularScreenShot",
    "disableRedirection", "callback", "timeout", "retryTimeout", "disableRetry",
    "output", "transparentResponse", "returnJSON", "showFrames", "showWebsocketRequests",
    "playWithBrowser",
])


def serialize_value(value: Any) -> str:
    """
    Render a single option value the way the service parses it.

    Booleans become "true"/"false", dicts and lists become compact JSON and
    everything else goes through str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def prepare_parameters(options: ScrapeModifiers) -> List[Tuple[str, str]]:
    """
    Convert set options into ordered (name, value) pairs restricted to the allow-list.

    Args:
        options: validated ScrapeOptions or bare ScrapeModifiers

    Returns:
        Parameter pairs in field declaration order
    """
    params: List[Tuple[str, str]] = []
    for key, value in options.model_dump(exclude_none=True).items():
        name = FIELD_MAPPINGS.get(key, key)
        if name not in ALLOWED_PARAMETERS:
            continue
        params.append((name, serialize_value(value)))
    return params


def build_api_url(api_key: str, options: ScrapeOptions, api_url: str = API_URL) -> str:
    """Build the direct-API request URL: token, target url, then the modifiers."""
    query: List[Tuple[str, str]] = [("token", api_key), ("url", options.url)]
    query.extend(prepare_parameters(options))
    return f"{api_url}?{urlencode(query)}"


def build_proxy_url(api_key: str, options: ScrapeModifiers) -> str:
    """
    Build the forward-proxy URI carrying the modifiers as proxy credentials.

    The target url is deliberately absent: in proxy mode it is the address
    requested through the tunnel.
    """
    params = urlencode(prepare_parameters(options))
    proxy_auth = f"{api_key}:{params}" if params else api_key
    return f"http://{proxy_auth}@{PROXY_HOST}:{PROXY_PORT}"


def build_transport_descriptor(
    api_key: str,
    options: ScrapeOptions,
    use_proxy: bool = False,
    api_url: str = API_URL,
) -> TransportDescriptor:
    """
    Select the transport mode and describe the single HTTP exchange to perform.

    Args:
        api_key: Scrape.do token
        options: validated scrape options
        use_proxy: True for proxy/tunnel mode, False for direct-API mode
        api_url: base URL of the API endpoint (direct mode only)

    Returns:
        TransportDescriptor for exactly one mode
    """
    common = {
        "method": options.method,
        "body": options.body if options.method in BODY_METHODS else None,
        "timeout": options.timeout or DEFAULT_TIMEOUT_MS,
        "max_redirects": 0 if options.disable_redirection else DEFAULT_MAX_REDIRECTS,
    }
    if use_proxy:
        return TransportDescriptor(
            mode="proxy",
            url=options.url,
            proxy_url=build_proxy_url(api_key, options),
            **common,
        )
    return TransportDescriptor(mode="direct", url=build_api_url(api_key, options, api_url), **common)


def build_info_url(api_key: str, api_url: str = API_URL) -> str:
    """URL of the read-only account usage endpoint."""
    return f"{api_url}/info/?{urlencode([('token', api_key)])}"
