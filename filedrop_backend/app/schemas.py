from __future__ import annotations

from pydantic import BaseModel


# =========================
# Health
# =========================
class StorageStatus(BaseModel):
    exists: bool
    writable: bool


class HealthOut(BaseModel):
    status: str  # "ok" or "degraded"
    storage_dir: str
    storage: StorageStatus
