from fastapi import HTTPException, status


class ApiError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Bad request"

    def __init__(self, detail: str | None = None, errors: list[dict] | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )
        self.errors = errors


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"


class InternalServerError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"
