"""Pydantic schemas for search analytics reports."""

from __future__ import annotations

from pydantic import BaseModel


class PopularSearch(BaseModel):
    query: str
    total_searches: int
    avg_results: float


class ZeroResultSearch(BaseModel):
    query: str
    zero_searches: int
    total_searches: int


class PopularSearchesResponse(BaseModel):
    days: int
    items: list[PopularSearch]


class ZeroResultSearchesResponse(BaseModel):
    days: int
    items: list[ZeroResultSearch]
