from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.core.repositories.base import SqlAlchemyRepository
from contact_manager.infrastructure.database.models.contact import Contact


class ContactRepository(SqlAlchemyRepository[Contact]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, Contact)

    async def list_contacts(self) -> list[Contact]:
        query = select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_email(self, email: str) -> Contact | None:
        return await self.get_by_filter(email=email, one_or_none=True)

    async def find_by_email_excluding(self, email: str, exclude_id: str) -> Contact | None:
        query = (
            select(Contact)
            .where(Contact.email == email)
            .where(Contact.id != exclude_id)
        )
        result = await self.session.execute(query)
        return result.scalars().one_or_none()

    async def create(self, fields: dict[str, str]) -> Contact:
        return await self.add_item(Contact(**fields))

    async def update_by_id(self, contact_id: str, fields: dict[str, str]) -> Contact | None:
        contact = await self.get_item(contact_id)
        if contact is None:
            return None
        return await self.update_item(
            contact,
            name=fields["name"],
            email=fields["email"],
            phone=fields["phone"],
            message=fields["message"],
        )

    async def delete_by_id(self, contact_id: str) -> Contact | None:
        contact = await self.get_item(contact_id)
        if contact is None:
            return None
        await self.delete_item(contact)
        return contact
