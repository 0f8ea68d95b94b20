"""Health check endpoint."""

from fastapi import APIRouter, Depends

from contador.application.ports.kv_store import KeyValueStore
from contador.config import settings
from contador.infrastructure.api.dependencies import get_kv_store
from contador.infrastructure.api.errors import json_response

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: KeyValueStore = Depends(get_kv_store)):
    """Check API and key-value store connectivity."""
    try:
        await store.get(settings.roster_key)
        store_status = "connected"
    except Exception as e:
        store_status = f"error: {type(e).__name__}"

    return json_response({
        "status": "ok" if store_status == "connected" else "degraded",
        "store": store_status,
        "backend": settings.kv_backend,
        "service": "Contador de Babaquinha",
    })
