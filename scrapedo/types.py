"""
Type definitions for the Scrape.do client.

Request options are declared in snake_case; the camelCase names the service
expects are produced by the request builder, not through Pydantic aliases.
"""

from typing import Any, Dict, List, Literal, Optional, Union
from urllib.parse import urlparse
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "HEAD"]
DeviceOption = Literal["desktop", "mobile", "tablet"]
WaitUntilOption = Literal["domcontentloaded", "networkidle0", "networkidle2", "load"]
RegionalGeoCode = Literal["europe", "asia", "africa", "oceania", "northamerica", "southamerica"]
OutputOption = Literal["raw", "markdown"]
ErrorType = Literal["rate_limit", "auth", "timeout", "client_canceled", "target_error", "unknown"]
TransportMode = Literal["direct", "proxy"]

SCREENSHOT_FIELDS = ("screen_shot", "full_screen_shot", "particular_screen_shot")


class ScrapeModifiers(BaseModel):
    """Every modifier the service understands, independent of the target."""
    model_config = ConfigDict(extra="forbid")

    # Rendering
    render: Optional[bool] = None
    device: Optional[DeviceOption] = None
    wait_until: Optional[WaitUntilOption] = None
    wait_selector: Optional[str] = None
    custom_wait: Optional[int] = Field(default=None, ge=0)
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    block_resources: Optional[bool] = None
    block_ads: Optional[bool] = None

    # Proxy and geo targeting
    super: Optional[bool] = None
    geo_code: Optional[str] = None
    regional_geo_code: Optional[RegionalGeoCode] = None
    session_id: Optional[int] = Field(default=None, ge=0, le=1_000_000)

    # Header and cookie control
    custom_headers: Optional[bool] = None
    extra_headers: Optional[bool] = None
    forward_headers: Optional[bool] = None
    set_cookies: Optional[str] = None
    pure_cookies: Optional[bool] = None

    # Screenshots
    screen_shot: Optional[bool] = None
    full_screen_shot: Optional[bool] = None
    particular_screen_shot: Optional[str] = None

    # Output shaping
    output: Optional[OutputOption] = None
    transparent_response: Optional[bool] = None
    return_json: Optional[bool] = None
    show_frames: Optional[bool] = None
    show_websocket_requests: Optional[bool] = None

    # Timing, retries and redirects
    timeout: Optional[int] = Field(default=None, ge=5000, le=120000)
    retry_timeout: Optional[int] = Field(default=None, ge=5000, le=55000)
    disable_retry: Optional[bool] = None
    disable_redirection: Optional[bool] = None

    # Asynchronous delivery and browser automation
    callback: Optional[str] = None
    play_with_browser: Optional[Union[str, List[Any]]] = None

    @model_validator(mode="after")
    def validate_screenshot_modes(self):
        active = self.active_screenshot_fields()
        if len(active) > 1:
            raise ValueError(
                "Only one of screen_shot, full_screen_shot, or particular_screen_shot can be enabled at a time"
            )
        if active and self.play_with_browser:
            raise ValueError("play_with_browser actions cannot be combined with screenshot capture flags")
        return self

    def active_screenshot_fields(self) -> List[str]:
        return [name for name in SCREENSHOT_FIELDS if getattr(self, name)]


class ScrapeOptions(ScrapeModifiers):
    """A single scrape request: the target, the HTTP verb and the modifiers."""
    url: str
    method: HttpMethod = "GET"
    body: Optional[str] = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("URL cannot be empty")
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"URL must be absolute (http or https): {v}")
        return v


class TransportDescriptor(BaseModel):
    """Everything the transport needs to perform one HTTP exchange."""
    mode: TransportMode
    method: HttpMethod = "GET"
    url: str
    proxy_url: Optional[str] = None
    body: Optional[str] = None
    timeout: int = 60000
    max_redirects: int = 5


class RawResponse(BaseModel):
    """Library-neutral view of an HTTP response."""
    status_code: int
    headers: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    text: str = ""


class ScrapeResult(BaseModel):
    """Normalized outcome of a successful scrape."""
    success: bool = True
    status_code: int
    url: str
    headers: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    html: Optional[str] = None
    text: Optional[str] = None
    markdown: Optional[str] = None
    screenshot: Optional[str] = None
    network_data: Optional[Any] = None
    frames: Optional[List[Any]] = None
    websockets: Optional[List[Any]] = None
    cookies: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Returns the result with the service's camelCase keys (exclude None)."""
        data = self.model_dump(exclude_none=True)
        mapping = {"status_code": "statusCode", "network_data": "networkData"}
        return {mapping.get(k, k): v for k, v in data.items()}


class UsageStats(BaseModel):
    """Account usage as reported by the info endpoint."""
    remaining_credits: int = 0
    used_credits: int = 0
    concurrency_limit: int = 10
    requests_today: int = 0


class ClientConfig(BaseModel):
    """Configuration for the Scrape.do client."""
    api_key: str
    api_url: str = "https://api.scrape.do"
    verify_proxy_tls: bool = False
