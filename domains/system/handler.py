from typing import Any

from domains.system.repository import SystemRepository

system_repository = SystemRepository()

ROOT_MESSAGE = "Backend is running"


async def get_status() -> dict[str, Any]:
    return {"ok": True, "message": ROOT_MESSAGE}


async def get_health() -> dict[str, Any]:
    return system_repository.get_health()
