from typing import Callable, Literal

from contact_manager.client.api_client import ApiResult, ContactsApiClient, NetworkFault
from contact_manager.client.form import ContactForm
from contact_manager.client.store import ContactStore
from contact_manager.core.dto.contact import ContactModel
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)

NotificationKind = Literal["success", "error"]
Notify = Callable[[str, NotificationKind], None]


class ContactBook:
    """
    Клиентский контроллер: синхронизирует ContactStore с API.

    Полная загрузка списка выполняется только в load(); после этого каждое
    успешное создание, изменение или удаление применяется к хранилищу
    точечно. Результат каждой операции сообщается через notify.
    """

    def __init__(
        self,
        api: ContactsApiClient,
        notify: Notify,
        store: ContactStore | None = None,
    ):
        self.api = api
        self.notify = notify
        self.store = store or ContactStore()
        self.loading = False

    async def load(self) -> bool:
        self.loading = True
        try:
            result = await self.api.list_contacts()
        except NetworkFault as exc:
            logger.error("contacts_load_failed", error=str(exc))
            self.notify("Failed to load contacts", "error")
            return False
        finally:
            self.loading = False

        if not result.success:
            self.notify(result.message or "Failed to load contacts", "error")
            return False

        self.store.load(result.data or [])
        return True

    async def add(self, form: ContactForm) -> ContactModel | None:
        if not form.validate():
            return None

        result = await self._submit(
            form,
            lambda: self.api.create_contact(form.payload()),
            failure_message="Failed to add contact. Please try again.",
        )
        if result is None:
            return None

        form.reset()
        self.store.apply_create(result.data)
        self.notify("Contact added successfully! 🎉", "success")
        return result.data

    async def update(self, contact_id: str, form: ContactForm) -> ContactModel | None:
        if not form.validate():
            return None

        result = await self._submit(
            form,
            lambda: self.api.update_contact(contact_id, form.payload()),
            failure_message="Failed to update contact. Please try again.",
        )
        if result is None:
            return None

        self.store.apply_update(result.data)
        self.notify("Contact updated successfully! ✅", "success")
        return result.data

    async def delete(self, contact_id: str) -> bool:
        try:
            result = await self.api.delete_contact(contact_id)
        except NetworkFault as exc:
            logger.error("contact_delete_request_failed", contact_id=contact_id, error=str(exc))
            self.notify("Failed to delete contact", "error")
            return False

        if not result.success:
            self.notify(result.message, "error")
            return False

        self.store.apply_remove(result.data.id)
        self.notify("Contact deleted successfully", "success")
        return True

    async def _submit(self, form: ContactForm, send, failure_message: str) -> ApiResult | None:
        form.submitting = True
        try:
            result = await send()
        except NetworkFault as exc:
            logger.error("contact_submit_failed", error=str(exc))
            self.notify(failure_message, "error")
            return None
        finally:
            form.submitting = False

        if result.success:
            return result

        if result.errors:
            form.apply_server_errors(result.errors)
        else:
            self.notify(result.message, "error")
        return None
