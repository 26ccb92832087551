"""
Error handling utilities for the Scrape.do client.
"""

from typing import Any, Dict, NoReturn, Optional, Union, List
from ..types import ErrorType


class TransportFault(Exception):
    """
    Raised by the transports when an exchange does not produce a usable response.

    Carries an HTTP status when the service answered, or ``timed_out`` when the
    exchange was aborted before any status arrived.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        timed_out: bool = False,
        headers: Optional[Dict[str, Union[str, List[str]]]] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.timed_out = timed_out
        self.headers = headers or {}
        self.details = details


class ScrapedoError(Exception):
    """Base exception for Scrape.do API errors."""

    error_type: ErrorType = "unknown"

    def __init__(
        self,
        message: str,
        status_code: int,
        consumed_credits: bool,
        retryable: bool,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.consumed_credits = consumed_credits
        self.retryable = retryable
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "statusCode": self.status_code,
            "errorType": self.error_type,
            "consumedCredits": self.consumed_credits,
            "retryable": self.retryable,
            "message": str(self),
        }
        if self.details is not None:
            data["details"] = self.details
        return data


class RateLimitError(ScrapedoError):
    """Raised when the concurrency or rate limit is exceeded (429)."""
    error_type: ErrorType = "rate_limit"


class UnauthorizedError(ScrapedoError):
    """Raised when the token is missing or invalid (401)."""
    error_type: ErrorType = "auth"


class RequestTimeoutError(ScrapedoError):
    """Raised when the exchange was aborted or timed out before a status arrived."""
    error_type: ErrorType = "timeout"


class ClientCanceledError(ScrapedoError):
    """Raised when the request was canceled on the client side (510)."""
    error_type: ErrorType = "client_canceled"


class TargetError(ScrapedoError):
    """Raised when the target site rejected or could not serve the request (400, 404)."""
    error_type: ErrorType = "target_error"


class UnknownScrapedoError(ScrapedoError):
    """Raised for every status without a dedicated classification."""
    error_type: ErrorType = "unknown"


# status -> (error class, label, consumed_credits, retryable)
_STATUS_TABLE = {
    429: (RateLimitError, "Rate Limit Exceeded", False, True),
    401: (UnauthorizedError, "Unauthorized", False, False),
    404: (TargetError, "Target Not Found", True, False),
    400: (TargetError, "Bad Request", False, False),
    502: (UnknownScrapedoError, "Bad Gateway", False, True),
    510: (ClientCanceledError, "Request Canceled", False, False),
}


def classify_transport_fault(fault: TransportFault, action: str = "scrape") -> ScrapedoError:
    """
    Map a transport fault onto one of the six error kinds.

    A status listed in the table wins; the timeout signal is only consulted
    when the status is not listed.

    Args:
        fault: the fault raised by a transport
        action: description of the action being performed

    Returns:
        ScrapedoError subclass instance carrying billing and retry hints
    """
    status = fault.status_code
    if status in _STATUS_TABLE:
        error_cls, label, consumed_credits, retryable = _STATUS_TABLE[status]
        details = fault.details
        if status == 429:
            details = {"retry_after": fault.headers.get("retry-after")}
        message = f"{label}: Failed to {action}. Status code {status}"
        return error_cls(message, status, consumed_credits, retryable, details)

    if fault.timed_out:
        message = f"Request Timeout: Failed to {action} as the request timed out. {fault}"
        return RequestTimeoutError(message, 0, False, True, fault.details)

    status = status or 500
    message = f"Unexpected error during {action}: Status code {status}. {fault}"
    return UnknownScrapedoError(message, status, True, False, fault.details)


def handle_transport_fault(fault: TransportFault, action: str) -> NoReturn:
    """
    Classify a transport fault and raise the resulting error.

    Raises:
        ScrapedoError: Appropriate error based on status code or timeout
    """
    raise classify_transport_fault(fault, action) from fault
