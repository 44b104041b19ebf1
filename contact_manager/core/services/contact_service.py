from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from contact_manager.core.dto.contact import ContactCreateModel, ContactModel
from contact_manager.core.repositories.contact_repository import ContactRepository
from contact_manager.core.validation import normalize_contact, validate_contact
from contact_manager.infrastructure.errors.contact_errors import (
    ContactNotFoundError,
    ContactValidationError,
    DuplicateEmailError,
    InvalidIdError,
    PersistenceFault,
)
from contact_manager.infrastructure.logging import get_logger
from contact_manager.utils.object_id import is_valid_object_id, normalize_object_id


logger = get_logger(__name__)


class ContactService:

    def __init__(self, repository: ContactRepository):
        self.repository = repository

    def _validated_fields(self, data: ContactCreateModel) -> dict[str, str]:
        raw = data.model_dump()
        errors = validate_contact(raw)
        if errors:
            logger.info("contact_validation_failed", fields=[error.path for error in errors])
            raise ContactValidationError(errors)
        return normalize_contact(raw)

    def _checked_id(self, contact_id: str) -> str:
        if not is_valid_object_id(contact_id):
            raise InvalidIdError()
        return normalize_object_id(contact_id)

    async def list_contacts(self) -> list[ContactModel]:
        try:
            contacts = await self.repository.list_contacts()
        except SQLAlchemyError as exc:
            logger.error("contacts_fetch_failed", error=str(exc))
            raise PersistenceFault("Failed to fetch contacts") from exc
        return [ContactModel.model_validate(contact) for contact in contacts]

    async def create_contact(self, data: ContactCreateModel) -> ContactModel:
        fields = self._validated_fields(data)

        try:
            if await self.repository.find_by_email(fields["email"]):
                logger.info("contact_duplicate_email", email=fields["email"])
                raise DuplicateEmailError()
            contact = await self.repository.create(fields)
        except IntegrityError as exc:
            # запись с тем же email успела появиться после проверки
            logger.warning("contact_duplicate_email_on_write", email=fields["email"])
            raise DuplicateEmailError() from exc
        except SQLAlchemyError as exc:
            logger.error("contact_create_failed", error=str(exc))
            raise PersistenceFault("Failed to create contact") from exc

        logger.info("contact_created", contact_id=contact.id)
        return ContactModel.model_validate(contact)

    async def update_contact(self, contact_id: str, data: ContactCreateModel) -> ContactModel:
        contact_id = self._checked_id(contact_id)
        fields = self._validated_fields(data)

        try:
            if await self.repository.find_by_email_excluding(fields["email"], contact_id):
                logger.info("contact_duplicate_email", email=fields["email"], contact_id=contact_id)
                raise DuplicateEmailError()
            contact = await self.repository.update_by_id(contact_id, fields)
        except IntegrityError as exc:
            logger.warning("contact_duplicate_email_on_write", email=fields["email"], contact_id=contact_id)
            raise DuplicateEmailError() from exc
        except SQLAlchemyError as exc:
            logger.error("contact_update_failed", contact_id=contact_id, error=str(exc))
            raise PersistenceFault("Failed to update contact") from exc

        if contact is None:
            raise ContactNotFoundError()

        logger.info("contact_updated", contact_id=contact_id)
        return ContactModel.model_validate(contact)

    async def delete_contact(self, contact_id: str) -> ContactModel:
        contact_id = self._checked_id(contact_id)

        try:
            contact = await self.repository.delete_by_id(contact_id)
        except SQLAlchemyError as exc:
            logger.error("contact_delete_failed", contact_id=contact_id, error=str(exc))
            raise PersistenceFault("Failed to delete contact") from exc

        if contact is None:
            raise ContactNotFoundError()

        logger.info("contact_deleted", contact_id=contact_id)
        return ContactModel.model_validate(contact)
