"""
Purpose:
- The "service" orchestrates request -> query-string -> outbound GET -> relay.
- One outbound call per inbound request; no caching, no retries.

Notes:
- The arXiv response (an Atom feed) is never parsed, only passed through.
- Transport errors, timeouts and non-2xx answers all surface as UpstreamFailure.
"""

from __future__ import annotations
import httpx
from ..core.logging import logger
from ..core.settings import Settings, settings as default_settings
from .errors import InvalidRequest, UpstreamFailure
from .query import build_free_query, build_search_query
from .schema import FreeSearchRequest, RelayResult, SearchRequest

DEFAULT_CONTENT_TYPE = "application/atom+xml"

def upstream_url(query: str, settings: Settings = default_settings) -> str:
    return f"{settings.arxiv_api_url}?{query}"

async def fetch_upstream(client: httpx.AsyncClient, url: str, timeout: float) -> RelayResult:
    logger.debug("relay.upstream_request", url=url)
    try:
        r = await client.get(url, timeout=timeout)
        r.raise_for_status()
    except httpx.InvalidURL as e:
        raise InvalidRequest(f"Query could not be sent upstream: {e}") from e
    except httpx.TimeoutException as e:
        logger.warning("relay.upstream_failed", url=url, reason="timeout")
        raise UpstreamFailure("timed out", url=url) from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("relay.upstream_failed", url=url, reason="status", status_code=status)
        raise UpstreamFailure(f"status {status}", url=url) from e
    except httpx.HTTPError as e:
        logger.warning("relay.upstream_failed", url=url, reason=type(e).__name__)
        raise UpstreamFailure(type(e).__name__, url=url) from e

    return RelayResult(
        url=url,
        content_type=r.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
        body=r.text,
    )

async def search_service(
    client: httpx.AsyncClient, payload: SearchRequest, settings: Settings = default_settings
) -> RelayResult:
    query = build_search_query(payload.keywords, payload.limit, payload.negatives, payload.start)
    return await fetch_upstream(client, upstream_url(query, settings), settings.upstream_timeout_seconds)

async def free_search_service(
    client: httpx.AsyncClient, payload: FreeSearchRequest, settings: Settings = default_settings
) -> RelayResult:
    query = build_free_query(payload.keywords, payload.limit, payload.negative)
    return await fetch_upstream(client, upstream_url(query, settings), settings.upstream_timeout_seconds)
