from mediacatalog.client.session import AuthSession


def test_in_memory_session() -> None:
    session = AuthSession()
    assert not session.is_authenticated
    assert session.auth_headers() == {}

    session.set_token("abc")
    assert session.is_authenticated
    assert session.auth_headers() == {"Authorization": "Bearer abc"}
    assert session.sync() is False

    session.clear()
    assert session.token is None


def test_token_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "session.json"
    AuthSession(path).set_token("abc")

    assert AuthSession(path).token == "abc"


def test_clear_removes_file(tmp_path) -> None:
    path = tmp_path / "session.json"
    session = AuthSession(path)
    session.set_token("abc")
    session.clear()
    assert not path.exists()
    assert AuthSession(path).token is None


def test_listeners_fire_on_change_only() -> None:
    session = AuthSession()
    seen = []
    unsubscribe = session.subscribe(seen.append)

    session.set_token("abc")
    session.set_token("abc")
    session.clear()
    unsubscribe()
    session.set_token("later")

    assert seen == ["abc", None]


def test_sync_picks_up_other_writer(tmp_path) -> None:
    path = tmp_path / "session.json"
    tab_a = AuthSession(path)
    tab_b = AuthSession(path)
    seen = []
    tab_a.subscribe(seen.append)

    tab_b.set_token("from-b")
    assert tab_a.sync() is True
    assert tab_a.token == "from-b"

    tab_b.clear()
    assert tab_a.sync() is True
    assert tab_a.token is None
    assert seen == ["from-b", None]


def test_unreadable_file_is_ignored(tmp_path) -> None:
    path = tmp_path / "session.json"
    path.write_text("not json", encoding="utf-8")
    assert AuthSession(path).token is None
