import logging
from typing import Any, Dict, List, Optional, Union
import httpx
from .error_handler import TransportFault
from .get_version import get_version
from .http_client import error_details, sanitize_url
from .request_builder import API_URL, DEFAULT_TIMEOUT_MS
from ..types import RawResponse, TransportDescriptor

version = get_version()


class AsyncHttpClient:
    def __init__(
        self,
        api_key: str,
        api_url: str = API_URL,
        verify_proxy_tls: bool = False,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.verify_proxy_tls = verify_proxy_tls
        self.logger = logger or logging.getLogger("scrapedo")
        self._transport = transport

    def _client_kwargs(self, descriptor: TransportDescriptor) -> Dict[str, Any]:
        # One AsyncClient per exchange: proxy, TLS and redirect settings are per request.
        kwargs: Dict[str, Any] = {
            "timeout": descriptor.timeout / 1000,
            "follow_redirects": descriptor.max_redirects > 0,
            "max_redirects": descriptor.max_redirects,
        }
        if descriptor.mode == "proxy":
            kwargs["verify"] = self.verify_proxy_tls
            kwargs["trust_env"] = False
            # httpx mounts the proxy on all://, which outranks a plain transport
            if self._transport is not None:
                kwargs["mounts"] = {"all://": self._transport}
            else:
                kwargs["proxy"] = descriptor.proxy_url
        else:
            kwargs["headers"] = {"User-Agent": f"scrapedo-py/{version}"}
            if self._transport is not None:
                kwargs["transport"] = self._transport
        return kwargs

    @staticmethod
    def _to_raw_response(response: httpx.Response) -> RawResponse:
        headers: Dict[str, Union[str, List[str]]] = {k.lower(): v for k, v in response.headers.items()}
        cookies = response.headers.get_list("set-cookie")
        if len(cookies) > 1:
            headers["set-cookie"] = cookies
        return RawResponse(status_code=response.status_code, headers=headers, text=response.text)

    async def execute(self, descriptor: TransportDescriptor, logger: Optional[logging.Logger] = None) -> RawResponse:
        log = logger or self.logger
        log.debug("API Call: %s %s", descriptor.method, sanitize_url(descriptor.url))
        if descriptor.mode == "proxy":
            log.debug("Using proxy mode via %s", sanitize_url(descriptor.proxy_url or ""))

        try:
            async with httpx.AsyncClient(**self._client_kwargs(descriptor)) as client:
                response = await client.request(
                    descriptor.method,
                    descriptor.url,
                    content=descriptor.body.encode("utf-8") if descriptor.body is not None else None,
                )
        except httpx.TimeoutException as e:
            log.error("API Call timed out: %s %s", descriptor.method, sanitize_url(descriptor.url))
            raise TransportFault(str(e) or "timeout", timed_out=True) from e
        except httpx.HTTPError as e:
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

    async def get(
        self, url: str, timeout: int = DEFAULT_TIMEOUT_MS, logger: Optional[logging.Logger] = None
    ) -> RawResponse:
        descriptor = TransportDescriptor(mode="direct", method="GET", url=url, timeout=timeout)
        return await self.execute(descriptor, logger=logger)
