from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable

from pyuca import Collator

from contact_manager.core.dto.contact import ContactModel


class SortKey(str, Enum):
    NAME = "name"
    EMAIL = "email"
    DATE = "date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    # таблица DUCET загружается один раз, при первой сортировке по тексту
    return Collator()


def _text_key(value: str) -> tuple[tuple[int, ...], str]:
    """Ключ сортировки по Unicode Collation Algorithm: 'Émile' идёт перед 'Zoe'"""
    return get_collator().sort_key(value), value


SORT_KEYS = {
    SortKey.NAME: lambda contact: _text_key(contact.name),
    SortKey.EMAIL: lambda contact: _text_key(contact.email),
    SortKey.DATE: lambda contact: contact.created_at.timestamp(),
}


def matches_query(contact: ContactModel, query: str) -> bool:
    query = query.casefold()
    if not query:
        return True
    return (
        query in contact.name.casefold()
        or query in contact.email.casefold()
        or query in contact.phone.casefold()
        or bool(contact.message) and query in contact.message.casefold()
    )


@dataclass
class ListView:
    """Отфильтрованное и отсортированное представление списка контактов"""

    query: str = ""
    sort_key: SortKey = SortKey.DATE
    direction: SortDirection = SortDirection.DESC

    def toggle_sort(self, key: SortKey | str) -> None:
        key = SortKey(key)
        if key == self.sort_key:
            self.direction = (
                SortDirection.DESC if self.direction == SortDirection.ASC else SortDirection.ASC
            )
        else:
            self.sort_key = key
            self.direction = SortDirection.ASC

    def filter(self, contacts: Iterable[ContactModel]) -> list[ContactModel]:
        return [contact for contact in contacts if matches_query(contact, self.query)]

    def sort(self, contacts: Iterable[ContactModel]) -> list[ContactModel]:
        return sorted(
            contacts,
            key=SORT_KEYS[self.sort_key],
            reverse=self.direction == SortDirection.DESC,
        )

    def project(self, contacts: Iterable[ContactModel]) -> list[ContactModel]:
        return self.sort(self.filter(contacts))

    def summary(self, contacts: Iterable[ContactModel]) -> str:
        contacts = list(contacts)
        shown = len(self.filter(contacts))
        if shown == len(contacts):
            return f"Total contacts: {len(contacts)}"
        return f"Showing {shown} of {len(contacts)} contacts"
