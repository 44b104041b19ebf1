from typing import Callable

from contact_manager.core.dto.contact import ContactModel
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)

Listener = Callable[["ContactStore"], None]


class ContactStore:
    """
    Единственный источник списка контактов на клиенте.

    Список заполняется один раз через load(), дальше меняется только
    через apply_create / apply_update / apply_remove. Каждое изменение
    увеличивает version и оповещает подписчиков.
    """

    def __init__(self):
        self._contacts: list[ContactModel] = []
        self._version = 0
        self._listeners: list[Listener] = []

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._contacts)

    def get_all(self) -> tuple[ContactModel, ...]:
        return tuple(self._contacts)

    def get(self, contact_id: str) -> ContactModel | None:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self, contacts: list[ContactModel]) -> None:
        self._contacts = list(contacts)
        self._changed("load")

    def apply_create(self, contact: ContactModel) -> None:
        self._contacts.insert(0, contact)
        self._changed("create")

    def apply_update(self, contact: ContactModel) -> bool:
        for index, existing in enumerate(self._contacts):
            if existing.id == contact.id:
                self._contacts[index] = contact
                self._changed("update")
                return True
        return False

    def apply_remove(self, contact_id: str) -> bool:
        remaining = [contact for contact in self._contacts if contact.id != contact_id]
        if len(remaining) == len(self._contacts):
            return False
        self._contacts = remaining
        self._changed("remove")
        return True

    def _changed(self, action: str) -> None:
        self._version += 1
        logger.debug("contact_store_changed", action=action, version=self._version, size=len(self._contacts))
        for listener in list(self._listeners):
            listener(self)
