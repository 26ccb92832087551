"""
HTTP transport utilities for the Scrape.do client.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional, Union
import requests
from .error_handler import TransportFault
from .get_version import get_version
from .request_builder import API_URL, DEFAULT_TIMEOUT_MS
from ..types import RawResponse, TransportDescriptor

version = get_version()

_TOKEN_RE = re.compile(r"(?<=[?&]token=)[^&#]+")
_USERINFO_RE = re.compile(r"(?<=://)([^:@/]+)(?::[^@/]*)?@")


def mask_secret(secret: str) -> str:
    """Keep the first and last four characters of a secret."""
    if len(secret) <= 8:
        return "***"
    return f"{secret[:4]}***{secret[-4:]}"


def sanitize_url(url: str) -> str:
    """Mask the token in a query string and the credentials of a proxy URI."""
    url = _TOKEN_RE.sub(lambda m: mask_secret(m.group(0)), url)
    return _USERINFO_RE.sub(lambda m: f"{mask_secret(m.group(1))}:***@", url)


def error_details(raw: RawResponse) -> Optional[Any]:
    """Best-effort extraction of the error payload of a failed response."""
    try:
        return json.loads(raw.text)
    except ValueError:
        text = raw.text[:500]
        return {"body": text} if text.strip() else None


class HttpClient:
    """
    Blocking transport: performs exactly one HTTP exchange per descriptor.

    No retries are attempted here; retrying is the service's job.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = API_URL,
        verify_proxy_tls: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.verify_proxy_tls = verify_proxy_tls
        self.logger = logger or logging.getLogger("scrapedo")

    def _prepare_headers(self, descriptor: TransportDescriptor) -> Dict[str, str]:
        """Prepare headers; the tunnel forwards nothing of ours to the target."""
        if descriptor.mode == "proxy":
            return {}
        return {"User-Agent": f"scrapedo-py/{version}"}

    @staticmethod
    def _to_raw_response(response: requests.Response) -> RawResponse:
        headers: Dict[str, Union[str, List[str]]] = {k.lower(): v for k, v in response.headers.items()}
        # requests folds repeated headers; the urllib3 header dict keeps each Set-Cookie
        raw_headers = getattr(response.raw, "headers", None)
        if hasattr(raw_headers, "getlist"):
            cookies = raw_headers.getlist("set-cookie")
            if len(cookies) > 1:
                headers["set-cookie"] = list(cookies)
        return RawResponse(status_code=response.status_code, headers=headers, text=response.text)

    def execute(self, descriptor: TransportDescriptor, logger: Optional[logging.Logger] = None) -> RawResponse:
        """
        Perform the exchange described by ``descriptor``.

        Args:
            descriptor: transport descriptor from the request builder
            logger: logger for this call only (defaults to the client's)

        Returns:
            RawResponse for any status below 400

        Raises:
            TransportFault: on a status >= 400 or any requests-level failure
        """
        log = logger or self.logger
        log.debug("API Call: %s %s", descriptor.method, sanitize_url(descriptor.url))

        kwargs: Dict[str, Any] = {}
        with requests.Session() as session:
            session.max_redirects = descriptor.max_redirects
            if descriptor.mode == "proxy":
                log.debug("Using proxy mode via %s", sanitize_url(descriptor.proxy_url or ""))
                session.trust_env = False
                kwargs["proxies"] = {"http": descriptor.proxy_url, "https": descriptor.proxy_url}
                kwargs["verify"] = self.verify_proxy_tls

            try:
                response = session.request(
                    descriptor.method,
                    descriptor.url,
                    headers=self._prepare_headers(descriptor),
                    data=descriptor.body.encode("utf-8") if descriptor.body is not None else None,
                    timeout=descriptor.timeout / 1000,
                    allow_redirects=descriptor.max_redirects > 0,
                    **kwargs,
                )
            except requests.Timeout as e:
                log.error("API Call timed out: %s %s", descriptor.method, sanitize_url(descriptor.url))
                raise TransportFault(str(e), timed_out=True) from e
            except requests.RequestException as e:
                log.error("API Call failed: %s %s: %s", descriptor.method, sanitize_url(descriptor.url), e)
                raise TransportFault(str(e)) from e

        raw = self._to_raw_response(response)
        log.debug(
            "API Response: %s %s - %s (%d bytes)",
            descriptor.method,
            sanitize_url(descriptor.url),
            raw.status_code,
            len(raw.text),
        )

        if raw.status_code >= 400:
            raise TransportFault(
                f"Server responded with status {raw.status_code}",
                status_code=raw.status_code,
                headers=raw.headers,
                details=error_details(raw),
            )
        return raw

    def get(self, url: str, timeout: int = DEFAULT_TIMEOUT_MS, logger: Optional[logging.Logger] = None) -> RawResponse:
        """Make a single direct GET request."""
        descriptor = TransportDescriptor(mode="direct", method="GET", url=url, timeout=timeout)
        return self.execute(descriptor, logger=logger)
