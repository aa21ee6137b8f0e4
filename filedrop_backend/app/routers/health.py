# filedrop_backend/app/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from .. import schemas, storage
from ..core.config import Settings
from ..deps import get_settings

router = APIRouter(prefix="/health", tags=["health"])


# The static mount at "/" swallows unmatched paths, so both spellings are routed.
@router.get("", response_model=schemas.HealthOut)
@router.get("/", response_model=schemas.HealthOut, include_in_schema=False)
def health(settings: Settings = Depends(get_settings)):
    checks = storage.check_storage(settings.STORAGE_DIR)
    ok = checks["exists"] and checks["writable"]
    return schemas.HealthOut(
        status="ok" if ok else "degraded",
        storage_dir=settings.STORAGE_DIR,
        storage=schemas.StorageStatus(**checks),
    )
