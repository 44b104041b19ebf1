from contact_manager.core.dto.contact import ErrorResponse
from contact_manager.infrastructure.errors.base import ApiError


def error_response(*errors: type[ApiError]) -> dict[int | str, dict]:
    """Описание ошибок для OpenAPI (параметр responses у роутов)"""
    responses: dict[int | str, dict] = {}
    for error in errors:
        response = responses.setdefault(
            error.status_code,
            {"model": ErrorResponse, "description": error.detail},
        )
        if error.detail not in response["description"]:
            response["description"] += f" / {error.detail}"
    return responses
