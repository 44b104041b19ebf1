from .api_client import ApiResult, ContactsApiClient, NetworkFault
from .contact_book import ContactBook
from .export import EmptyExportError, contacts_to_csv, export_filename, write_csv_export
from .form import ContactForm
from .list_view import ListView, SortDirection, SortKey
from .store import ContactStore


__all__ = [
    "ApiResult",
    "ContactsApiClient",
    "NetworkFault",
    "ContactBook",
    "EmptyExportError",
    "contacts_to_csv",
    "export_filename",
    "write_csv_export",
    "ContactForm",
    "ListView",
    "SortDirection",
    "SortKey",
    "ContactStore",
]
