# Common language: Environment/ops probe that surfaces version pins and the upstream target.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter, Depends
from ..core.settings import Settings, get_settings
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

@router.get("/healthz")
def healthz(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "httpx": _ver("httpx"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "structlog": _ver("structlog"),
        },
        "upstream": {
            "url": settings.arxiv_api_url,
            "timeout_seconds": settings.upstream_timeout_seconds,
            "default_limit": settings.default_limit,
            "default_start": settings.default_start,
        },
    }
