"""Centralized v1 API router: all module routers are included here."""

from fastapi import APIRouter

from catalog_search.modules.analytics.router import router as analytics_router
from catalog_search.modules.discovery.router import router as discovery_router
from catalog_search.modules.search.router import router as search_router
from catalog_search.modules.synonyms.router import router as synonyms_router

v1_router = APIRouter(prefix="/api/v1")
# Discovery paths share the /synonyms prefix; include before /synonyms/{synonym_id}
v1_router.include_router(discovery_router)
v1_router.include_router(synonyms_router)
v1_router.include_router(analytics_router)
v1_router.include_router(search_router)
