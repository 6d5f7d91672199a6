from fastapi import APIRouter

from domains.system import handler

router = APIRouter(tags=["System"])


@router.get("/")
async def root() -> dict[str, object]:
    return await handler.get_status()


@router.get("/health")
async def health() -> dict[str, object]:
    return await handler.get_health()
