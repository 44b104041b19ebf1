from sqlalchemy import Index
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.database.models.base import Base


class Contact(Base):
    __tablename__ = "contacts"
    __table_args__ = (
        Index("ix_contacts_created_at", "created_at"),
    )

    name: Mapped[str]
    email: Mapped[str] = mapped_column(unique=True, index=True)
    phone: Mapped[str]
    message: Mapped[str] = mapped_column(default="")

    def __repr__(self):
        return f"<Contact(name='{self.name}', email='{self.email}')>"
