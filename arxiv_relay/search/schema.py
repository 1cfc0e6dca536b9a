"""
Purpose:
- Pydantic models for the per-request values the relay works with.
- Nothing here outlives one request/response cycle.
"""

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional, Tuple, Union

class SearchRequest(BaseModel):
    keywords: Tuple[str, ...] = Field(..., min_length=1, description="Terms ANDed under all:")
    negatives: Tuple[str, ...] = Field(default=(), description="Terms excluded via AND NOT (...)")
    # limit/start are relayed verbatim when the client sends them
    limit: Union[int, str] = 15
    start: Union[int, str] = 0

class FreeSearchRequest(BaseModel):
    keywords: str = Field(..., description="Raw arXiv search_query expression")
    limit: str
    negative: Optional[str] = None

class RelayResult(BaseModel):
    url: str
    content_type: str
    body: str
