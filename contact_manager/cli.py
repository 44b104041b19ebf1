"""
Консольный клиент для API контактов.

    contact-manager serve
    contact-manager list --search jo --sort name --order asc
    contact-manager add --name "Jo Lin" --email jo@ex.com --phone "555 123 4567"
    contact-manager edit <id> --phone 1234567890
    contact-manager delete <id>
    contact-manager export --dir ./exports
"""
import argparse
import asyncio
import sys

from contact_manager.client import (
    ContactBook,
    ContactForm,
    ContactsApiClient,
    EmptyExportError,
    ListView,
    SortDirection,
    SortKey,
    write_csv_export,
)
from contact_manager.client.export import format_date_added
from contact_manager.core.dto.contact import ContactModel
from contact_manager.infrastructure.config.config import APP_CONFIG, CLIENT_CONFIG


def print_notification(message: str, kind: str) -> None:
    icon = "✅" if kind == "success" else "❌"
    print(f"{icon} {message}")


def print_contacts(contacts: list[ContactModel]) -> None:
    for contact in contacts:
        print(f"  {contact.id}  {contact.name:<24} {contact.email:<32} {contact.phone}  {format_date_added(contact.created_at)}")
        if contact.message:
            print(f"      {contact.message}")


def print_form_errors(form: ContactForm) -> None:
    for name, error in form.errors.items():
        if error:
            print(f"❌ {name}: {error}")


def build_view(args: argparse.Namespace) -> ListView:
    return ListView(
        query=args.search or "",
        sort_key=SortKey(args.sort),
        direction=SortDirection(args.order),
    )


async def run_list(book: ContactBook, args: argparse.Namespace) -> int:
    if not await book.load():
        return 1
    contacts = book.store.get_all()
    if not contacts:
        print("No contacts yet")
        return 0
    view = build_view(args)
    print(view.summary(contacts))
    print_contacts(view.project(contacts))
    return 0


async def run_add(book: ContactBook, args: argparse.Namespace) -> int:
    form = ContactForm()
    for name in ("name", "email", "phone", "message"):
        form.change(name, getattr(args, name) or "")
    contact = await book.add(form)
    if contact is None:
        print_form_errors(form)
        return 1
    print_contacts([contact])
    return 0


async def run_edit(book: ContactBook, args: argparse.Namespace) -> int:
    if not await book.load():
        return 1
    existing = book.store.get(args.id.lower())
    if existing is None:
        print_notification("Contact not found", "error")
        return 1

    form = ContactForm.from_contact(existing)
    for name in ("name", "email", "phone", "message"):
        value = getattr(args, name)
        if value is not None:
            form.change(name, value)

    contact = await book.update(existing.id, form)
    if contact is None:
        print_form_errors(form)
        return 1
    print_contacts([contact])
    return 0


async def run_delete(book: ContactBook, args: argparse.Namespace) -> int:
    return 0 if await book.delete(args.id) else 1


async def run_export(book: ContactBook, args: argparse.Namespace) -> int:
    if not await book.load():
        return 1
    view = build_view(args)
    try:
        path = write_csv_export(view.project(book.store.get_all()), directory=args.dir)
    except EmptyExportError as exc:
        print_notification(str(exc), "error")
        return 1
    print_notification(f"Exported to {path}", "success")
    return 0


COMMANDS = {
    "list": run_list,
    "add": run_add,
    "edit": run_edit,
    "delete": run_delete,
    "export": run_export,
}


async def run_client(args: argparse.Namespace) -> int:
    async with ContactsApiClient(base_url=args.api_url) as api:
        book = ContactBook(api=api, notify=print_notification)
        return await COMMANDS[args.command](book, args)


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "contact_manager.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--search", help="Подстрока для поиска по имени, email, телефону, сообщению")
    parser.add_argument("--sort", choices=[key.value for key in SortKey], default=SortKey.DATE.value)
    parser.add_argument("--order", choices=[order.value for order in SortDirection], default=SortDirection.DESC.value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contact-manager",
        description="Управление контактами через REST API"
    )
    parser.add_argument(
        "--api-url",
        default=CLIENT_CONFIG.CONTACTS_API_URL,
        help="Адрес API (по умолчанию CONTACTS_API_URL)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Запустить API сервер")
    serve_parser.add_argument("--host", default=APP_CONFIG.HOST)
    serve_parser.add_argument("--port", type=int, default=APP_CONFIG.PORT)
    serve_parser.add_argument("--reload", action="store_true")

    list_parser = subparsers.add_parser("list", help="Показать контакты")
    add_view_arguments(list_parser)

    add_parser = subparsers.add_parser("add", help="Добавить контакт")
    add_parser.add_argument("--name", required=True)
    add_parser.add_argument("--email", required=True)
    add_parser.add_argument("--phone", required=True)
    add_parser.add_argument("--message")

    edit_parser = subparsers.add_parser("edit", help="Изменить контакт")
    edit_parser.add_argument("id")
    edit_parser.add_argument("--name")
    edit_parser.add_argument("--email")
    edit_parser.add_argument("--phone")
    edit_parser.add_argument("--message")

    delete_parser = subparsers.add_parser("delete", help="Удалить контакт")
    delete_parser.add_argument("id")

    export_parser = subparsers.add_parser("export", help="Выгрузить контакты в CSV")
    add_view_arguments(export_parser)
    export_parser.add_argument("--dir", default=".", help="Папка для файла contacts_<дата>.csv")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return serve(args)
    return asyncio.run(run_client(args))


if __name__ == "__main__":
    sys.exit(main())
