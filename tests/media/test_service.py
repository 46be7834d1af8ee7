import pytest

from mediacatalog.auth.service import register_user
from mediacatalog.media import service
from mediacatalog.media.constants import MediaType


async def _users(db_session):
    owner = await register_user(db_session, name="Owner", email="owner@x.com", password="pw")
    other = await register_user(db_session, name="Other", email="other@x.com", password="pw")
    return owner, other


@pytest.mark.asyncio
async def test_create_and_get_round_trip(db_session) -> None:
    owner, _ = await _users(db_session)
    fields = {
        "title": "Dune",
        "type": MediaType.MOVIE,
        "director": "Denis Villeneuve",
        "budget": "$165M",
        "location": "Jordan",
        "duration": "155 min",
        "year": "2021",
    }
    created = await service.create_entry(db_session, user_id=owner.id, fields=fields, image="/uploads/1-dune.jpg")

    fetched = await service.get_entry(db_session, created.id, owner.id)
    assert fetched is not None
    for name, value in fields.items():
        assert getattr(fetched, name) == value
    assert fetched.image == "/uploads/1-dune.jpg"
    assert fetched.created_at is not None


@pytest.mark.asyncio
async def test_other_user_cannot_see_entry(db_session) -> None:
    owner, other = await _users(db_session)
    entry = await service.create_entry(
        db_session, user_id=owner.id, fields={"title": "Dune", "type": MediaType.MOVIE},
    )
    assert await service.get_entry(db_session, entry.id, other.id) is None
    assert await service.list_entries(db_session, other.id) == []
    assert await service.delete_entry(db_session, entry.id, other.id) is False
    assert await service.get_entry(db_session, entry.id, owner.id) is not None


@pytest.mark.asyncio
async def test_list_is_newest_first(db_session) -> None:
    owner, _ = await _users(db_session)
    for title in ("First", "Second", "Third"):
        await service.create_entry(
            db_session, user_id=owner.id, fields={"title": title, "type": MediaType.MOVIE},
        )
    titles = [e.title for e in await service.list_entries(db_session, owner.id)]
    assert titles == ["Third", "Second", "First"]


@pytest.mark.asyncio
async def test_update_keeps_image_when_none_given(db_session) -> None:
    owner, _ = await _users(db_session)
    entry = await service.create_entry(
        db_session,
        user_id=owner.id,
        fields={"title": "Dune", "type": MediaType.MOVIE, "year": "2021"},
        image="/uploads/1-dune.jpg",
    )
    updated = await service.update_entry(db_session, entry, fields={"title": "Dune: Part One"})
    assert updated.title == "Dune: Part One"
    assert updated.year == "2021"
    assert updated.image == "/uploads/1-dune.jpg"


@pytest.mark.asyncio
async def test_update_replaces_image(db_session) -> None:
    owner, _ = await _users(db_session)
    entry = await service.create_entry(
        db_session,
        user_id=owner.id,
        fields={"title": "Dune", "type": MediaType.MOVIE},
        image="/uploads/1-old.jpg",
    )
    updated = await service.update_entry(db_session, entry, fields={}, image="/uploads/2-new.jpg")
    assert updated.image == "/uploads/2-new.jpg"


@pytest.mark.asyncio
async def test_delete_removes_entry(db_session) -> None:
    owner, _ = await _users(db_session)
    entry = await service.create_entry(
        db_session, user_id=owner.id, fields={"title": "Dune", "type": MediaType.MOVIE},
    )
    assert await service.delete_entry(db_session, entry.id, owner.id) is True
    assert await service.get_entry(db_session, entry.id, owner.id) is None
