import pytest

from mediacatalog.client.schemas import MediaItem
from mediacatalog.client.search import (
    apply_filters,
    filter_by_category,
    fuzzy_filter,
    match_score,
)


def _item(id: int, title: str, type: str = "Movie", **extra) -> MediaItem:
    return MediaItem(id=id, title=title, type=type, **extra)


@pytest.fixture
def items() -> list[MediaItem]:
    return [
        _item(1, "Dune", year="2021", director="Denis Villeneuve"),
        _item(2, "Breaking Bad", type="TV Show", year="2008"),
        _item(3, "Dunkirk"),
    ]


def test_blank_query_keeps_everything_in_order(items) -> None:
    assert fuzzy_filter(items, "   ") == items


def test_exact_title_ranks_first(items) -> None:
    result = fuzzy_filter(items, "dune")
    assert [i.id for i in result] == [1, 3]


def test_typo_still_matches(items) -> None:
    result = fuzzy_filter(items, "dnue")
    assert [i.id for i in result][:1] == [1]
    assert 2 not in [i.id for i in result]


def test_matches_on_year(items) -> None:
    assert [i.id for i in fuzzy_filter(items, "2021")] == [1]


def test_zero_threshold_means_exact(items) -> None:
    assert [i.id for i in fuzzy_filter(items, "dune", threshold=0.0)] == [1]


def test_full_threshold_accepts_everything(items) -> None:
    assert len(fuzzy_filter(items, "zzz", threshold=1.0)) == 3


def test_match_score_ignores_missing_fields() -> None:
    item = _item(1, "Dune")
    assert match_score(item, "Dune") == 1.0
    assert match_score(item, "Villeneuve") < 0.7


def test_category_filter_is_case_insensitive(items) -> None:
    assert [i.id for i in filter_by_category(items, "tv show")] == [2]
    assert filter_by_category(items, "All") == items
    assert filter_by_category(items, "Documentary") == []


def test_apply_filters_combines_category_and_query(items) -> None:
    assert [i.id for i in apply_filters(items, "dune", "Movie")] == [1, 3]
    assert apply_filters(items, "dune", "TV Show") == []
