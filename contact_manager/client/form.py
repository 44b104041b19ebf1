from dataclasses import dataclass, field

from contact_manager.core.dto.contact import ContactModel, FieldErrorModel
from contact_manager.core.validation import (
    CONTACT_FIELDS,
    normalize_phone,
    validate_contact,
    validate_field,
)


REQUIRED_FIELDS = ("name", "email", "phone")


@dataclass
class ContactForm:
    """Состояние формы добавления / редактирования контакта"""

    values: dict[str, str] = field(default_factory=lambda: dict.fromkeys(CONTACT_FIELDS, ""))
    errors: dict[str, str] = field(default_factory=dict)
    submitting: bool = False

    @classmethod
    def from_contact(cls, contact: ContactModel) -> "ContactForm":
        return cls(values={
            "name": contact.name,
            "email": contact.email,
            "phone": contact.phone,
            "message": contact.message or "",
        })

    def change(self, name: str, value: str) -> None:
        if name not in CONTACT_FIELDS:
            raise KeyError(name)
        self.values[name] = value
        if self.errors.get(name):
            self.errors[name] = ""

    def blur(self, name: str) -> str:
        error = validate_field(name, self.values.get(name, ""))
        self.errors[name] = error
        return error

    def validate(self) -> bool:
        self.errors = dict.fromkeys(REQUIRED_FIELDS, "")
        for error in validate_contact(self.values):
            self.errors[error.path] = error.msg
        return not any(self.errors.values())

    @property
    def is_submittable(self) -> bool:
        return all(self.values.get(name) for name in REQUIRED_FIELDS) and not any(
            self.errors.get(name) for name in REQUIRED_FIELDS
        )

    def apply_server_errors(self, errors: list[FieldErrorModel]) -> None:
        self.errors = {error.path: error.msg for error in errors}

    def payload(self) -> dict[str, str]:
        return {**self.values, "phone": normalize_phone(self.values["phone"])}

    def reset(self) -> None:
        self.values = dict.fromkeys(CONTACT_FIELDS, "")
        self.errors = {}
        self.submitting = False
