from fastapi import status

from contact_manager.core.validation import FieldError
from contact_manager.infrastructure.errors.base import ApiError, InternalServerError, NotFoundError


class ContactValidationError(ApiError):
    """Одно или несколько полей контакта не прошли проверку"""
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Validation failed"

    def __init__(self, errors: list[FieldError]):
        super().__init__(errors=[error.as_dict() for error in errors])


class DuplicateEmailError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "A contact with this email already exists"


class InvalidIdError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid contact ID"


class ContactNotFoundError(NotFoundError):
    detail = "Contact not found"


class PersistenceFault(InternalServerError):
    """Хранилище недоступно или вернуло ошибку"""
    detail = "Database error"
