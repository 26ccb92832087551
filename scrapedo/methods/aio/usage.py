from ...types import UsageStats
from ...utils.error_handler import TransportFault, handle_transport_fault
from ...utils.http_client_async import AsyncHttpClient
from ...utils.request_builder import build_info_url
from ..usage import _parse_usage_stats


async def get_usage_stats(client: AsyncHttpClient) -> UsageStats:
    client.logger.debug("Fetching usage statistics")
    try:
        resp = await client.get(build_info_url(client.api_key, client.api_url))
    except TransportFault as fault:
        client.logger.error("Failed to get usage stats: %s", fault)
        handle_transport_fault(fault, "get usage stats")
    return _parse_usage_stats(resp)
