import pytest

from contact_manager.client.form import ContactForm
from contact_manager.core.dto.contact import FieldErrorModel


def filled_form(**values) -> ContactForm:
    form = ContactForm()
    for name, value in {"name": "Jo Lin", "email": "jo@ex.com", "phone": "555 123 4567", **values}.items():
        form.change(name, value)
    return form


def test_new_form_is_empty_and_not_submittable():
    form = ContactForm()

    assert form.values == {"name": "", "email": "", "phone": "", "message": ""}
    assert not form.is_submittable


def test_change_clears_error_for_that_field():
    form = ContactForm()
    form.blur("name")
    assert form.errors["name"] == "Name is required"

    form.change("name", "J")

    assert form.errors["name"] == ""


def test_change_unknown_field():
    with pytest.raises(KeyError):
        ContactForm().change("address", "somewhere")


def test_blur_validates_single_field():
    form = filled_form(email="nope")

    assert form.blur("email") == "Please enter a valid email address"
    assert "phone" not in form.errors


def test_validate_collects_all_errors():
    form = filled_form(name="J", phone="123")

    assert not form.validate()
    assert form.errors == {
        "name": "Name must be at least 2 characters",
        "email": "",
        "phone": "Please enter a valid 10-digit phone number",
    }
    assert not form.is_submittable


def test_valid_form_is_submittable():
    form = filled_form()

    assert form.validate()
    assert form.is_submittable


def test_payload_strips_phone_whitespace():
    form = filled_form(message="hello")

    assert form.payload() == {
        "name": "Jo Lin",
        "email": "jo@ex.com",
        "phone": "5551234567",
        "message": "hello",
    }


def test_apply_server_errors():
    form = filled_form()

    form.apply_server_errors([FieldErrorModel(path="email", msg="Please enter a valid email address")])

    assert form.errors == {"email": "Please enter a valid email address"}
    assert not form.is_submittable


def test_from_contact_and_reset(make_contact):
    contact = make_contact(message="note")

    form = ContactForm.from_contact(contact)
    assert form.values["email"] == contact.email
    assert form.values["message"] == "note"

    form.reset()
    assert form.values == {"name": "", "email": "", "phone": "", "message": ""}
    assert form.errors == {}
