"""
Unit tests for ContactService with a mocked repository.
"""
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from contact_manager.core.dto.contact import ContactCreateModel
from contact_manager.core.services.contact_service import ContactService
from contact_manager.infrastructure.errors.contact_errors import (
    ContactNotFoundError,
    ContactValidationError,
    DuplicateEmailError,
    InvalidIdError,
    PersistenceFault,
)


CONTACT_ID = "507f1f77bcf86cd799439011"


def stored_contact(**overrides) -> SimpleNamespace:
    now = datetime(2026, 1, 5, 15, 4, tzinfo=timezone.utc)
    values = {
        "id": CONTACT_ID,
        "name": "Jo Lin",
        "email": "jo@ex.com",
        "phone": "5551234567",
        "message": "",
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def repository() -> AsyncMock:
    repository = AsyncMock()
    repository.find_by_email.return_value = None
    repository.find_by_email_excluding.return_value = None
    return repository


@pytest.fixture
def service(repository: AsyncMock) -> ContactService:
    return ContactService(repository=repository)


@pytest.fixture
def payload() -> ContactCreateModel:
    return ContactCreateModel(name=" Jo Lin ", email="JO@EX.com", phone="555 123 4567")


@pytest.mark.asyncio
async def test_create_normalizes_fields(service, repository, payload):
    repository.create.return_value = stored_contact()

    contact = await service.create_contact(payload)

    repository.find_by_email.assert_awaited_once_with("jo@ex.com")
    repository.create.assert_awaited_once_with({
        "name": "Jo Lin",
        "email": "jo@ex.com",
        "phone": "5551234567",
        "message": "",
    })
    assert contact.id == CONTACT_ID


@pytest.mark.asyncio
async def test_create_rejects_invalid_fields_before_touching_repository(service, repository):
    with pytest.raises(ContactValidationError) as exc_info:
        await service.create_contact(ContactCreateModel(name="J", email="bad", phone="12"))

    assert [error["path"] for error in exc_info.value.errors] == ["name", "email", "phone"]
    repository.find_by_email.assert_not_awaited()
    repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_duplicate_email(service, repository, payload):
    repository.find_by_email.return_value = stored_contact()

    with pytest.raises(DuplicateEmailError):
        await service.create_contact(payload)

    repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_unique_violation_on_write_is_duplicate(service, repository, payload):
    repository.create.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    with pytest.raises(DuplicateEmailError):
        await service.create_contact(payload)


@pytest.mark.asyncio
async def test_create_storage_failure(service, repository, payload):
    repository.create.side_effect = SQLAlchemyError("database is down")

    with pytest.raises(PersistenceFault) as exc_info:
        await service.create_contact(payload)

    assert exc_info.value.detail == "Failed to create contact"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", ["123", "not-an-object-id", "507f1f77bcf86cd79943901z"])
async def test_update_and_delete_reject_malformed_ids_without_lookup(service, repository, payload, bad_id):
    with pytest.raises(InvalidIdError):
        await service.update_contact(bad_id, payload)
    with pytest.raises(InvalidIdError):
        await service.delete_contact(bad_id)

    repository.find_by_email_excluding.assert_not_awaited()
    repository.update_by_id.assert_not_awaited()
    repository.delete_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_checks_id_before_fields(service):
    with pytest.raises(InvalidIdError):
        await service.update_contact("bad", ContactCreateModel())


@pytest.mark.asyncio
async def test_update_uses_lowercased_id(service, repository, payload):
    repository.update_by_id.return_value = stored_contact()

    await service.update_contact(CONTACT_ID.upper(), payload)

    repository.find_by_email_excluding.assert_awaited_once_with("jo@ex.com", CONTACT_ID)
    assert repository.update_by_id.await_args.args[0] == CONTACT_ID


@pytest.mark.asyncio
async def test_update_duplicate_email(service, repository, payload):
    repository.find_by_email_excluding.return_value = stored_contact(id="0" * 24)

    with pytest.raises(DuplicateEmailError):
        await service.update_contact(CONTACT_ID, payload)

    repository.update_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_not_found(service, repository, payload):
    repository.update_by_id.return_value = None

    with pytest.raises(ContactNotFoundError):
        await service.update_contact(CONTACT_ID, payload)


@pytest.mark.asyncio
async def test_delete_not_found(service, repository):
    repository.delete_by_id.return_value = None

    with pytest.raises(ContactNotFoundError):
        await service.delete_contact(CONTACT_ID)


@pytest.mark.asyncio
async def test_list_storage_failure(service, repository):
    repository.list_contacts.side_effect = SQLAlchemyError("database is down")

    with pytest.raises(PersistenceFault) as exc_info:
        await service.list_contacts()

    assert exc_info.value.detail == "Failed to fetch contacts"
