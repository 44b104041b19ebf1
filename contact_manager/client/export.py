"""
Выгрузка контактов в CSV.

Дата добавления выводится в локальном часовом поясе машины, на которой
работает клиент (переменная TZ / системные настройки), как в браузере.
"""
import csv
import io
from datetime import date, datetime
from pathlib import Path
from typing import Sequence

from contact_manager.core.dto.contact import ContactModel
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)

CSV_HEADERS = ["Name", "Email", "Phone", "Message", "Date Added"]


class EmptyExportError(Exception):
    def __init__(self, message: str = "No contacts to export"):
        super().__init__(message)


def format_date_added(value: datetime) -> str:
    """Дата в виде 'Jan 5, 2026, 03:04 PM'"""
    local = value.astimezone()
    return f"{local:%b} {local.day}, {local:%Y, %I:%M %p}"


def contacts_to_csv(contacts: Sequence[ContactModel]) -> str:
    if not contacts:
        raise EmptyExportError()

    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADERS) + "\n")
    # QUOTE_ALL удваивает кавычки внутри значений
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for contact in contacts:
        writer.writerow([
            contact.name,
            contact.email,
            contact.phone,
            contact.message or "",
            format_date_added(contact.created_at),
        ])
    return buffer.getvalue().rstrip("\n")


def export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"contacts_{today.isoformat()}.csv"


def write_csv_export(
    contacts: Sequence[ContactModel],
    directory: Path | str = ".",
    today: date | None = None,
) -> Path:
    content = contacts_to_csv(contacts)
    path = Path(directory) / export_filename(today)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("contacts_exported", path=str(path), count=len(contacts))
    return path
