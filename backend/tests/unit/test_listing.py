"""Unit tests for listing parameters, pagination arithmetic and LIKE escaping."""

from datetime import datetime, timezone

import pytest

from event_platform.application.schemas import PERSON_SORT_FIELDS, BaseFilter
from event_platform.domain.entities import EntityStatus
from event_platform.domain.listing import (
    DEFAULT_SORT,
    ListParams,
    Page,
    contains_pattern,
    escape_like,
    parse_date_bound,
    total_pages_for,
)

SORTABLE = frozenset({"createdAt", "name"})


def test_normalize_defaults():
    params = ListParams.normalize(sortable=SORTABLE)
    assert params.page == 1
    assert params.limit == 10
    assert params.sort == DEFAULT_SORT
    assert params.descending is True
    assert params.search is None
    assert params.status is None


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (0, 0, (1, 1)),
        (-3, 500, (1, 100)),
        (4, 25, (4, 25)),
        (None, None, (1, 10)),
    ],
)
def test_normalize_clamps_page_and_limit(page, limit, expected):
    params = ListParams.normalize(sortable=SORTABLE, page=page, limit=limit)
    assert (params.page, params.limit) == expected


def test_normalize_uses_resource_default_limit():
    params = ListParams.normalize(sortable=SORTABLE, default_limit=20)
    assert params.limit == 20


def test_unknown_sort_falls_back_to_created_at():
    params = ListParams.normalize(sortable=SORTABLE, sort="password_hash")
    assert params.sort == "createdAt"


def test_only_asc_sorts_ascending():
    assert ListParams.normalize(sortable=SORTABLE, order="ASC").descending is False
    assert ListParams.normalize(sortable=SORTABLE, order="desc").descending is True
    assert ListParams.normalize(sortable=SORTABLE, order="sideways").descending is True


def test_status_is_parsed_case_insensitively():
    assert ListParams.normalize(sortable=SORTABLE, entity_status="deleted").status == (
        EntityStatus.DELETED
    )
    assert ListParams.normalize(sortable=SORTABLE, entity_status="archived").status is None


def test_blank_search_is_dropped():
    assert ListParams.normalize(sortable=SORTABLE, search="   ").search is None
    assert ListParams.normalize(sortable=SORTABLE, search="  ada ").search == "ada"


def test_skip_is_derived_from_page_and_limit():
    assert ListParams(page=3, limit=10).skip == 20


def test_base_filter_applies_resource_whitelist():
    params = BaseFilter(sort="lastName", order="asc", limit=250).to_params(
        sortable=PERSON_SORT_FIELDS, default_limit=20
    )
    assert params.sort == "lastName"
    assert params.descending is False
    assert params.limit == 100


# ── Date bounds ─────────────────────────────────────────────────────


def test_date_only_lower_bound_starts_the_day():
    assert parse_date_bound("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_date_only_upper_bound_covers_the_whole_day():
    bound = parse_date_bound("2024-03-01", end_of_day=True)
    assert bound.date() == datetime(2024, 3, 1).date()
    assert (bound.hour, bound.minute, bound.second) == (23, 59, 59)


def test_datetime_bound_keeps_its_offset():
    bound = parse_date_bound("2024-03-01T10:00:00+02:00")
    assert bound == datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


def test_zulu_suffix_is_accepted():
    assert parse_date_bound("2024-03-01T10:00:00Z") == datetime(
        2024, 3, 1, 10, 0, tzinfo=timezone.utc
    )


@pytest.mark.parametrize("raw", [None, "", "   ", "yesterday", "2024-13-45"])
def test_unparseable_bound_is_ignored(raw):
    assert parse_date_bound(raw) is None


# ── Page envelope ───────────────────────────────────────────────────


def test_empty_page_still_has_one_page():
    page = Page.build([], 0, ListParams())
    assert page.data == []
    assert page.total_items == 0
    assert page.total_pages == 1
    assert page.current_page == 1
    assert page.has_next_page is False
    assert page.has_previous_page is False


def test_last_partial_page():
    page = Page.build(["k", "l"], 12, ListParams(page=2, limit=10))
    assert page.total_pages == 2
    assert page.has_next_page is False
    assert page.has_previous_page is True


def test_page_past_the_end_is_empty_but_consistent():
    page = Page.build([], 12, ListParams(page=5, limit=10))
    assert page.data == []
    assert page.total_items == 12
    assert page.total_pages == 2
    assert page.current_page == 5
    assert page.has_next_page is False
    assert page.has_previous_page is True


@pytest.mark.parametrize(
    ("total", "limit", "pages"),
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 1, 100)],
)
def test_total_pages_for(total, limit, pages):
    assert total_pages_for(total, limit) == pages


# ── LIKE escaping ───────────────────────────────────────────────────


def test_escape_like_escapes_wildcards_and_the_escape_character():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"


def test_escape_like_leaves_regex_characters_alone():
    assert escape_like("a.*b") == "a.*b"


def test_contains_pattern_wraps_term():
    assert contains_pattern("ada") == "%ada%"
    assert contains_pattern("100%") == "%100\\%%"
