"""
Правила проверки полей контакта.

Общий модуль для API и клиента: каждое правило принимает сырое значение поля
и возвращает пустую строку, если значение корректно, или текст ошибки.
"""
import re
from dataclasses import dataclass
from typing import Any, Mapping


EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[0-9]{10}$")
WHITESPACE_RE = re.compile(r"\s")

NAME_MIN_LENGTH = 2

CONTACT_FIELDS = ("name", "email", "phone", "message")


@dataclass(frozen=True)
class FieldError:
    path: str
    msg: str

    def as_dict(self) -> dict[str, str]:
        return {"path": self.path, "msg": self.msg}


def validate_name(value: str | None) -> str:
    name = (value or "").strip()
    if not name:
        return "Name is required"
    if len(name) < NAME_MIN_LENGTH:
        return f"Name must be at least {NAME_MIN_LENGTH} characters"
    return ""


def validate_email(value: str | None) -> str:
    email = (value or "").strip()
    if not email:
        return "Email is required"
    if not EMAIL_RE.match(email):
        return "Please enter a valid email address"
    return ""


def validate_phone(value: str | None) -> str:
    if not (value or "").strip():
        return "Phone number is required"
    # \d would also accept non-ASCII digits
    if not PHONE_RE.match(normalize_phone(value)):
        return "Please enter a valid 10-digit phone number"
    return ""


FIELD_VALIDATORS = {
    "name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
}


def validate_field(field: str, value: str | None) -> str:
    validator = FIELD_VALIDATORS.get(field)
    if validator is None:
        return ""
    return validator(value)


def validate_contact(fields: Mapping[str, Any]) -> list[FieldError]:
    errors = []
    for field, validator in FIELD_VALIDATORS.items():
        message = validator(fields.get(field))
        if message:
            errors.append(FieldError(path=field, msg=message))
    return errors


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()


def normalize_phone(value: str | None) -> str:
    return WHITESPACE_RE.sub("", value or "")


def normalize_message(value: str | None) -> str:
    return (value or "").strip()


def normalize_contact(fields: Mapping[str, Any]) -> dict[str, str]:
    return {
        "name": normalize_name(fields.get("name")),
        "email": normalize_email(fields.get("email")),
        "phone": normalize_phone(fields.get("phone")),
        "message": normalize_message(fields.get("message")),
    }
