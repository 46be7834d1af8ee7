import pytest

from mediacatalog.client import CatalogClient
from mediacatalog.client.schemas import MediaForm
from mediacatalog.client.views import AuthView, MediaEditView, MediaListView
from mediacatalog.media.constants import MediaType


async def _logged_in(api: CatalogClient) -> None:
    auth = AuthView(api)
    assert await auth.register("A", "a@x.com", "pw1")
    assert await auth.login("a@x.com", "pw1")


async def _seed(api: CatalogClient) -> None:
    for title, media_type in (("Dune", MediaType.MOVIE), ("Breaking Bad", MediaType.TV_SHOW), ("Dunkirk", MediaType.MOVIE)):
        await api.create_media(MediaForm(title=title, type=media_type))


def _titles(view: MediaListView) -> list[str]:
    return [item.title for item in view.visible]


@pytest.mark.asyncio
async def test_auth_view_reports_errors(api_client: CatalogClient) -> None:
    auth = AuthView(api_client)
    assert not await auth.login("not-an-email", "pw1")
    assert "email" in auth.error

    assert await auth.register("A", "a@x.com", "pw1")
    assert auth.message == "Account created! You can now login."
    assert not await auth.register("A", "a@x.com", "pw1")
    assert auth.error == "User already exists"

    assert not await auth.login("a@x.com", "nope")
    assert auth.error == "Invalid credentials"
    assert await auth.login("a@x.com", "pw1")
    assert auth.message == "Login successful!"

    auth.logout()
    assert not api_client.session.is_authenticated


@pytest.mark.asyncio
async def test_list_view_search_and_category(api_client: CatalogClient) -> None:
    await _logged_in(api_client)
    await _seed(api_client)

    view = MediaListView(api_client, confirm=lambda title, text: True, debounce_seconds=0.01)
    await view.load()
    assert _titles(view) == ["Dunkirk", "Breaking Bad", "Dune"]

    view.set_query("d")
    view.set_query("dun")
    view.set_query("dune")
    await view.settle()
    assert _titles(view) == ["Dune", "Dunkirk"]

    view.set_category("TV Show")
    await view.settle()
    assert _titles(view) == []

    view.set_query("")
    await view.settle()
    assert _titles(view) == ["Breaking Bad"]

    with pytest.raises(ValueError):
        view.set_category("Podcast")


@pytest.mark.asyncio
async def test_delete_asks_first(api_client: CatalogClient) -> None:
    await _logged_in(api_client)
    await _seed(api_client)
    answers = [False, True]
    prompts = []

    def confirm(title: str, text: str) -> bool:
        prompts.append(title)
        return answers.pop(0)

    view = MediaListView(api_client, confirm=confirm, debounce_seconds=0.01)
    await view.load()
    target = view.items[0].id

    assert not await view.delete(target)
    assert len(view.items) == 3
    assert await view.delete(target)
    assert target not in [item.id for item in view.items]
    assert len(await api_client.list_media()) == 2
    assert prompts == ["Delete Media?", "Delete Media?"]


@pytest.mark.asyncio
async def test_edit_confirms_then_loads_form(api_client: CatalogClient) -> None:
    await _logged_in(api_client)
    await _seed(api_client)

    async def decline(title: str, text: str) -> bool:
        return False

    view = MediaListView(api_client, confirm=decline)
    await view.load()
    entry_id = view.items[0].id
    assert await view.edit(entry_id) is None

    view.confirm = lambda title, text: True
    editor = await view.edit(entry_id)
    assert editor is not None
    assert editor.form.title == "Dunkirk"

    saved = await editor.submit(title="Dunkirk (2017)", duration="106 min")
    assert saved.title == "Dunkirk (2017)"
    assert saved.duration == "106 min"
    assert saved.type == "Movie"


@pytest.mark.asyncio
async def test_edit_view_validates_before_sending(api_client: CatalogClient) -> None:
    await _logged_in(api_client)
    editor = MediaEditView(api_client)
    assert await editor.submit(title="   ") is None
    assert editor.error.startswith("title")
    assert await api_client.list_media() == []

    created = await editor.submit(title="Planet Earth", type=MediaType.TV_SHOW)
    assert created.type == "TV Show"
    assert editor.entry_id == created.id


@pytest.mark.asyncio
async def test_expired_session_redirects_to_login(api_client: CatalogClient) -> None:
    redirected = []
    api_client.session.set_token("stale")

    view = MediaListView(
        api_client,
        confirm=lambda title, text: True,
        on_unauthorized=lambda: redirected.append(True),
    )
    await view.load()

    assert redirected == [True]
    assert view.items == []
    assert view.error == "Invalid or expired token."
    assert not api_client.session.is_authenticated
