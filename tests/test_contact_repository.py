import pytest
from sqlalchemy.exc import IntegrityError

from contact_manager.core.repositories.contact_repository import ContactRepository


def fields(name: str = "Jo Lin", email: str = "jo@ex.com", phone: str = "5551234567", message: str = "") -> dict[str, str]:
    return {"name": name, "email": email, "phone": phone, "message": message}


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(repository: ContactRepository):
    contact = await repository.create(fields())

    assert len(contact.id) == 24
    assert contact.created_at is not None
    assert contact.updated_at is not None


@pytest.mark.asyncio
async def test_list_returns_newest_first(repository: ContactRepository):
    first = await repository.create(fields(email="first@ex.com"))
    second = await repository.create(fields(email="second@ex.com"))
    third = await repository.create(fields(email="third@ex.com"))

    contacts = await repository.list_contacts()

    assert [contact.id for contact in contacts] == [third.id, second.id, first.id]


@pytest.mark.asyncio
async def test_find_by_email(repository: ContactRepository):
    created = await repository.create(fields())

    assert (await repository.find_by_email("jo@ex.com")).id == created.id
    assert await repository.find_by_email("other@ex.com") is None


@pytest.mark.asyncio
async def test_find_by_email_excluding_skips_own_record(repository: ContactRepository):
    created = await repository.create(fields())

    assert await repository.find_by_email_excluding("jo@ex.com", created.id) is None
    assert (await repository.find_by_email_excluding("jo@ex.com", "0" * 24)).id == created.id


@pytest.mark.asyncio
async def test_update_by_id_keeps_id_and_created_at(repository: ContactRepository):
    created = await repository.create(fields())
    created_id, created_at = created.id, created.created_at

    updated = await repository.update_by_id(
        created_id,
        fields(name="Jo Updated", phone="1234567890", message="new note"),
    )

    assert updated.id == created_id
    assert updated.created_at == created_at
    assert updated.name == "Jo Updated"
    assert updated.phone == "1234567890"
    assert updated.message == "new note"


@pytest.mark.asyncio
async def test_update_by_id_missing_returns_none(repository: ContactRepository):
    assert await repository.update_by_id("0" * 24, fields()) is None


@pytest.mark.asyncio
async def test_delete_by_id_removes_record(repository: ContactRepository):
    keep = await repository.create(fields(email="keep@ex.com"))
    remove = await repository.create(fields(email="remove@ex.com"))

    deleted = await repository.delete_by_id(remove.id)

    assert deleted.email == "remove@ex.com"
    assert [contact.id for contact in await repository.list_contacts()] == [keep.id]
    assert await repository.delete_by_id(remove.id) is None


@pytest.mark.asyncio
async def test_email_unique_constraint(repository: ContactRepository):
    await repository.create(fields())

    with pytest.raises(IntegrityError):
        await repository.create(fields(name="Someone Else"))

    assert len(await repository.list_contacts()) == 1


@pytest.mark.asyncio
async def test_generic_lookups(repository: ContactRepository):
    created = await repository.create(fields(name="Same Name", email="one@ex.com"))
    await repository.create(fields(name="Same Name", email="two@ex.com"))

    assert (await repository.get_item(created.id)).email == "one@ex.com"
    assert await repository.get_item("0" * 24) is None
    assert len(await repository.get_by_filter(name="Same Name")) == 2
    assert await repository.get_by_filter(name="Nobody", one_or_none=True) is None
