import pytest

from mediacatalog.client import ApiError, CatalogClient, Unauthorized
from mediacatalog.client.schemas import LoginForm, MediaForm, RegisterForm
from mediacatalog.media.constants import MediaType


async def _sign_in(api: CatalogClient, email: str = "a@x.com", password: str = "pw1") -> None:
    await api.register(RegisterForm(name="A", email=email, password=password))
    await api.login(LoginForm(email=email, password=password))


@pytest.mark.asyncio
async def test_register_and_login_store_token(api_client: CatalogClient) -> None:
    user = await api_client.register(RegisterForm(name="A", email="a@x.com", password="pw1"))
    assert user["email"] == "a@x.com"
    assert "password" not in user
    assert not api_client.session.is_authenticated

    token = await api_client.login(LoginForm(email="a@x.com", password="pw1"))
    assert api_client.session.token == token


@pytest.mark.asyncio
async def test_duplicate_register_surfaces_server_message(api_client: CatalogClient) -> None:
    form = RegisterForm(name="A", email="a@x.com", password="pw1")
    await api_client.register(form)
    with pytest.raises(ApiError) as info:
        await api_client.register(form)
    assert info.value.status_code == 400
    assert info.value.message == "User already exists"


@pytest.mark.asyncio
async def test_bad_login_does_not_touch_session(api_client: CatalogClient) -> None:
    await api_client.register(RegisterForm(name="A", email="a@x.com", password="pw1"))
    with pytest.raises(ApiError) as info:
        await api_client.login(LoginForm(email="a@x.com", password="wrong"))
    assert not isinstance(info.value, Unauthorized)
    assert info.value.message == "Invalid credentials"
    assert api_client.session.token is None


@pytest.mark.asyncio
async def test_protected_call_without_token_fails_locally(api_client: CatalogClient) -> None:
    with pytest.raises(Unauthorized):
        await api_client.list_media()


@pytest.mark.asyncio
async def test_rejected_token_clears_session(api_client: CatalogClient) -> None:
    api_client.session.set_token("not-a-jwt")
    seen = []
    api_client.session.subscribe(seen.append)

    with pytest.raises(Unauthorized) as info:
        await api_client.list_media()

    assert info.value.message == "Invalid or expired token."
    assert api_client.session.token is None
    assert seen == [None]


@pytest.mark.asyncio
async def test_media_crud(api_client: CatalogClient, tmp_path) -> None:
    await _sign_in(api_client)
    poster = tmp_path / "dune poster.png"
    poster.write_bytes(b"png-bytes")

    created = await api_client.create_media(MediaForm(
        title="Dune", type=MediaType.MOVIE, director="Denis Villeneuve", year="2021", image=poster,
    ))
    assert created.title == "Dune"
    assert created.type == "Movie"
    assert created.image.endswith("-dune_poster.png")
    assert api_client.image_url(created) == f"http://test{created.image}"

    listed = await api_client.list_media()
    assert [item.id for item in listed] == [created.id]

    updated = await api_client.update_media(created.id, MediaForm(title="Dune: Part One", year="2021"))
    assert updated.title == "Dune: Part One"
    assert updated.director == "Denis Villeneuve"
    assert updated.image == created.image

    assert await api_client.delete_media(created.id) == "Media deleted successfully!"
    with pytest.raises(ApiError) as info:
        await api_client.get_media(created.id)
    assert info.value.status_code == 404
    assert api_client.session.is_authenticated


def test_media_form_drops_blank_fields() -> None:
    form = MediaForm(title=" Dune ", director="", year="2021")
    assert form.form_data() == {"title": "Dune", "type": "Movie", "year": "2021"}
