from datetime import datetime, timezone

from fastapi import APIRouter

from contact_manager.core.dto.contact import HealthResponse


router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    summary="Проверка работы сервера",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        message="Server is running",
        timestamp=datetime.now(timezone.utc),
    )
