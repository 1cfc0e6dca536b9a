"""
Purpose:
- Expose /search/ (strict keywords -> arXiv boolean query) and
  /freesearch/ (caller-written expression, relayed as-is).
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
import httpx
from ..core.logging import logger
from ..core.settings import Settings, get_settings
from ..search.errors import InvalidRequest
from ..search.params import ParamShapeError, is_empty, joined_value, normalize_terms, parse_term_param
from ..search.schema import FreeSearchRequest, SearchRequest
from ..search.service import free_search_service, search_service

router = APIRouter(tags=["search"])

KEYWORDS_ERROR = "Missing keywords parameter or incorrect type."
NEGATIVES_ERROR = "Incorrect type for negatives parameter."
FREE_ERROR = "Missing search, limit, or negative query parameters"

# Parameters are read from request.query_params (bracketed array forms included),
# so they are declared for the OpenAPI document here.
def _param(name: str, description: str, required: bool = False, array: bool = False, example=None) -> dict:
    schema = {"type": "array", "items": {"type": "string"}} if array else {"type": "string"}
    param = {"name": name, "in": "query", "required": required, "description": description, "schema": schema}
    if array:
        param.update(style="form", explode=True)
    if example is not None:
        param["example"] = example
    return param

SEARCH_PARAMS = [
    _param("keywords", "Terms that must all match, searched under the all: prefix. "
           "Repeat the parameter (or use keywords[]) for several terms.", required=True, array=True,
           example=["quantum", "gravity"]),
    _param("negatives", "Terms to exclude; combined as AND NOT (all:x AND all:y).", array=True),
    _param("limit", "Maximum number of results (max_results). Defaults to 15.", example="15"),
    _param("start", "Zero-based offset of the first result, for pagination. Defaults to 0.", example="0"),
]

FREE_PARAMS = [
    _param("keywords", "A complete arXiv search_query expression, e.g. "
           "au:del_maestro ANDNOT (ti:checkerboard OR ti:Pyrochlore).", required=True,
           example="au:del_maestro AND ti:checkerboard"),
    _param("limit", "Maximum number of results (max_results).", required=True, example="10"),
    _param("negative", "Forwarded upstream as exclude_fields; may be empty. "
           "Use ANDNOT inside keywords to actually exclude results.", required=True, example=""),
]

def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client

@router.get("/search/", response_class=PlainTextResponse, openapi_extra={"parameters": SEARCH_PARAMS})
async def search(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """
    Strict search. Query parameters:
    keywords (required, one or many), negatives (optional, one or many),
    limit (default 15), start (default 0).
    Responds with the upstream URL, a blank line, then the raw arXiv feed.
    """
    items = request.query_params.multi_items()
    try:
        keywords = parse_term_param(items, "keywords")
    except ParamShapeError as e:
        logger.debug("relay.invalid_request", path="/search/", reason=str(e))
        raise InvalidRequest(KEYWORDS_ERROR) from e
    try:
        negatives = parse_term_param(items, "negatives")
    except ParamShapeError as e:
        logger.debug("relay.invalid_request", path="/search/", reason=str(e))
        raise InvalidRequest(NEGATIVES_ERROR) from e
    if is_empty(keywords):
        logger.debug("relay.invalid_request", path="/search/", reason="keywords missing")
        raise InvalidRequest(KEYWORDS_ERROR)

    limit = joined_value(items, "limit")
    start = joined_value(items, "start")
    payload = SearchRequest(
        keywords=normalize_terms(keywords),
        negatives=normalize_terms(negatives),
        limit=settings.default_limit if limit is None else limit,
        start=settings.default_start if start is None else start,
    )
    result = await search_service(client, payload, settings)
    return PlainTextResponse(f"{result.url}\n\n{result.body}")

@router.get("/freesearch/", openapi_extra={"parameters": FREE_PARAMS})
async def free_search(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """
    Free-form search: keywords is a ready-made arXiv search_query expression.
    keywords, limit and negative are all required; none are validated further.
    """
    items = request.query_params.multi_items()
    keywords = joined_value(items, "keywords")
    limit = joined_value(items, "limit")
    negative = joined_value(items, "negative")
    if keywords is None or limit is None or negative is None:
        logger.debug("relay.invalid_request", path="/freesearch/", reason="missing parameter")
        raise InvalidRequest(FREE_ERROR)

    payload = FreeSearchRequest(keywords=keywords, limit=limit, negative=negative)
    result = await free_search_service(client, payload, settings)
    return Response(content=result.body, media_type=result.content_type)
