from ..types import RawResponse, UsageStats
from ..utils import HttpClient, TransportFault, handle_transport_fault
from ..utils.normalize import _parse_json_body
from ..utils.request_builder import build_info_url


def _parse_usage_stats(response: RawResponse) -> UsageStats:
    data = _parse_json_body(response.text) if response.text else {}
    if not isinstance(data, dict):
        data = {}
    return UsageStats(
        remaining_credits=data.get("remaining_credits") or 0,
        used_credits=data.get("used_credits") or 0,
        concurrency_limit=data.get("concurrency_limit") or 10,
        requests_today=data.get("requests_today") or 0,
    )


def get_usage_stats(client: HttpClient) -> UsageStats:
    client.logger.debug("Fetching usage statistics")
    try:
        resp = client.get(build_info_url(client.api_key, client.api_url))
    except TransportFault as fault:
        client.logger.error("Failed to get usage stats: %s", fault)
        handle_transport_fault(fault, "get usage stats")
    stats = _parse_usage_stats(resp)
    client.logger.info("Usage statistics retrieved: %s", stats.model_dump())
    return stats
