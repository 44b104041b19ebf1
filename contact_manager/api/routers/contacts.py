from typing import Annotated

from fastapi import APIRouter, Depends, status

from contact_manager.api.dependencies import get_contact_service
from contact_manager.core.dto.contact import ContactCreateModel, ContactListResponse, ContactResponse
from contact_manager.core.services.contact_service import ContactService
from contact_manager.infrastructure.errors.contact_errors import (
    ContactNotFoundError,
    ContactValidationError,
    DuplicateEmailError,
    InvalidIdError,
    PersistenceFault,
)
from contact_manager.utils.error_extra import error_response


router = APIRouter()


@router.get(
    "",
    response_model=ContactListResponse,
    summary="Получить все контакты",
    description="Возвращает все контакты, новые первыми",
    responses=error_response(PersistenceFault),
)
async def list_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactListResponse:
    contacts = await service.list_contacts()
    return ContactListResponse(count=len(contacts), data=contacts)


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Создать контакт",
    responses=error_response(ContactValidationError, DuplicateEmailError, PersistenceFault),
)
async def create_contact(
    data: ContactCreateModel,
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactResponse:
    """
    Создание контакта.

    Поля проверяются общими правилами валидации, email приводится к нижнему
    регистру и должен быть уникальным, из телефона удаляются пробелы.

    Raises:
        ContactValidationError (400): Если одно из полей некорректно.
        DuplicateEmailError (400): Если контакт с таким email уже есть.
    """
    contact = await service.create_contact(data)
    return ContactResponse(message="Contact added successfully!", data=contact)


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Обновить контакт",
    responses=error_response(
        InvalidIdError,
        ContactValidationError,
        DuplicateEmailError,
        ContactNotFoundError,
        PersistenceFault,
    ),
)
async def update_contact(
    contact_id: str,
    data: ContactCreateModel,
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactResponse:
    """
    Обновление имени, email, телефона и сообщения контакта.

    Идентификатор и дата создания не меняются. Контакт может сохранить
    свой собственный email.
    """
    contact = await service.update_contact(contact_id, data)
    return ContactResponse(message="Contact updated successfully!", data=contact)


@router.delete(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Удалить контакт",
    responses=error_response(InvalidIdError, ContactNotFoundError, PersistenceFault),
)
async def delete_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactResponse:
    contact = await service.delete_contact(contact_id)
    return ContactResponse(message="Contact deleted successfully", data=contact)
