"""
Purpose:
- FastAPI application factory and router mounts.
- Owns the shared outbound httpx client and maps relay errors to HTTP.
- Uvicorn will serve this on settings.host:settings.port (0.0.0.0:3000 by default).
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.logging import configure_logging, logger
from .core.settings import Settings, get_settings, settings as default_settings
from .search.errors import RelayError
from .api.health import router as health_router
from .api.search import router as search_router

API_DESCRIPTION = """
Finds research papers on arXiv. `/search/` takes keywords, optional negatives,
a limit and a start offset. `/freesearch/` takes a hand-written arXiv
`search_query` expression and relays it unchanged.

**Writing `/freesearch/` expressions**

Search a single field by putting its prefix and a colon before the term,
e.g. `au:del_maestro`.

| prefix | field |
|---|---|
| `ti` | Title |
| `au` | Author |
| `abs` | Abstract |
| `co` | Comment |
| `jr` | Journal reference |
| `cat` | Subject category |
| `rn` | Report number |
| `all` | All of the above at once |

Combine terms with the Boolean operators `AND`, `OR` and `ANDNOT`, separated
by spaces (`+` in a URL): `au:del_maestro AND ti:checkerboard`.
`ANDNOT` filters results out: `au:del_maestro ANDNOT ti:checkerboard`.

Group sub-expressions with parentheses (`%28` and `%29` in a URL):
`au:del_maestro ANDNOT (ti:checkerboard OR ti:Pyrochlore)`.
Search a phrase by wrapping it in double quotes (`%22` in a URL):
`ti:"quantum criticality"`.

Responses are the arXiv Atom feed. `/search/` puts the upstream URL in front of it.
"""

def create_app(settings: Settings = default_settings, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "http_client", None) is None:
            owned = httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)
            app.state.http_client = owned
        logger.info("relay.startup", host=settings.host, port=settings.port, upstream=settings.arxiv_api_url)
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.http_client = None

    app = FastAPI(
        title="arXiv Relay API",
        description=API_DESCRIPTION,
        version="0.1.0",
        lifespan=lifespan,
    )
    # injected clients (tests, embedding apps) are used as-is and never closed here
    app.state.http_client = http_client
    app.dependency_overrides[get_settings] = lambda: settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    app.include_router(health_router)
    app.include_router(search_router)
    return app

app = create_app()

def serve() -> None:
    configure_logging(default_settings.log_level, json=default_settings.log_json)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)

if __name__ == "__main__":
    serve()
