"""Unit tests for the listing query builder (compiled SQL, no database)."""

from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite

from event_platform.domain.entities import EntityStatus, PersonType
from event_platform.domain.listing import ListParams
from event_platform.infrastructure.database.models import PersonModel, SpeakerModel
from event_platform.infrastructure.database.repositories import (
    ListQuery,
    SQLAlchemyPersonRepository,
)
from event_platform.infrastructure.database.repositories.list_query import JsonArray


def _query(params: ListParams) -> ListQuery:
    return ListQuery(
        PersonModel,
        params,
        sort_columns=SQLAlchemyPersonRepository.sort_columns,
        search_columns=SQLAlchemyPersonRepository.search_columns,
    )


def _compile(stmt):
    return stmt.compile(dialect=sqlite.dialect())


def test_default_scope_hides_deleted_rows():
    _, page_stmt = _query(ListParams()).statements()
    compiled = _compile(page_stmt)
    assert "persons.entity_status != ?" in str(compiled)
    assert EntityStatus.DELETED.value in compiled.params.values()


def test_explicit_status_replaces_default_scope():
    _, page_stmt = _query(ListParams(status=EntityStatus.DELETED)).statements()
    sql = str(_compile(page_stmt))
    assert "persons.entity_status = ?" in sql
    assert "!=" not in sql


def test_order_by_has_id_tiebreak_in_same_direction():
    _, page_stmt = _query(ListParams(sort="lastName", descending=False)).statements()
    sql = str(_compile(page_stmt))
    assert "ORDER BY persons.last_name ASC, persons.id ASC" in sql

    _, page_stmt = _query(ListParams(sort="lastName", descending=True)).statements()
    sql = str(_compile(page_stmt))
    assert "ORDER BY persons.last_name DESC, persons.id DESC" in sql


def test_unknown_sort_orders_by_created_at():
    _, page_stmt = _query(ListParams(sort="passwordHash")).statements()
    assert "ORDER BY persons.created_at DESC, persons.id DESC" in str(_compile(page_stmt))


def test_window_uses_skip_and_limit():
    _, page_stmt = _query(ListParams(page=5, limit=10)).statements()
    compiled = _compile(page_stmt)
    assert "LIMIT ? OFFSET ?" in str(compiled)
    assert 10 in compiled.params.values()
    assert 40 in compiled.params.values()


def test_search_is_an_escaped_or_across_columns():
    _, page_stmt = _query(ListParams(search="50%_off")).statements()
    compiled = _compile(page_stmt)
    sql = str(compiled)
    assert sql.count("LIKE") == 3
    assert "ESCAPE '\\'" in sql
    assert " OR " in sql
    assert "%50\\%\\_off%" in compiled.params.values()


def test_regex_characters_are_bound_literally():
    _, page_stmt = _query(ListParams(search="a.*b")).statements()
    assert "%a.*b%" in _compile(page_stmt).params.values()


def test_count_statement_ignores_ordering_and_window():
    count_stmt, _ = _query(ListParams(page=3, sort="email")).statements()
    sql = str(_compile(count_stmt))
    assert sql.startswith("SELECT count(*)")
    assert "ORDER BY" not in sql
    assert "LIMIT" not in sql


def test_equals_skips_none_and_unwraps_enums():
    query = _query(ListParams())
    query.equals(PersonModel.type, None)
    query.equals(PersonModel.type, PersonType.SPEAKER_PERSON)
    _, page_stmt = query.statements()
    compiled = _compile(page_stmt)
    assert str(compiled).count("persons.type = ?") == 1
    assert "speaker_person" in compiled.params.values()


def test_created_range_adds_both_bounds():
    params = ListParams(
        created_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
        created_to=datetime(2024, 1, 31, tzinfo=timezone.utc),
    )
    _, page_stmt = _query(params).statements()
    sql = str(_compile(page_stmt))
    assert "persons.created_at >= ?" in sql
    assert "persons.created_at <= ?" in sql


def test_sort_whitelist_accepts_sql_expressions():
    query = ListQuery(
        PersonModel,
        ListParams(sort="lastName", descending=False),
        sort_columns={
            "createdAt": PersonModel.created_at,
            "lastName": func.lower(PersonModel.last_name),
        },
    )
    _, page_stmt = query.statements()
    assert "ORDER BY lower(persons.last_name) ASC, persons.id ASC" in str(_compile(page_stmt))


# ── JSON array elements ─────────────────────────────────────────────


def _speaker_query() -> ListQuery:
    return ListQuery(
        SpeakerModel, ListParams(), sort_columns={"createdAt": SpeakerModel.created_at}
    )


def test_json_array_is_matched_per_element_on_sqlite():
    query = _speaker_query()
    query.contains(JsonArray(SpeakerModel.languages), "Español")
    _, page_stmt = query.statements()
    compiled = _compile(page_stmt)
    sql = str(compiled)
    assert "EXISTS (SELECT 1" in sql
    assert "json_each(speakers.languages)" in sql
    assert "ESCAPE '\\'" in sql
    assert "%Español%" in compiled.params.values()


def test_json_array_uses_array_elements_on_postgresql():
    query = _speaker_query()
    query.contains(JsonArray(SpeakerModel.topics), '"')
    _, page_stmt = query.statements()
    compiled = page_stmt.compile(dialect=postgresql.dialect())
    assert "json_array_elements_text(speakers.topics)" in str(compiled)
    assert '%"%' in compiled.params.values()


def test_search_can_include_json_arrays():
    query = ListQuery(
        SpeakerModel,
        ListParams(search="ml"),
        sort_columns={"createdAt": SpeakerModel.created_at},
        search_columns=(SpeakerModel.specialty, JsonArray(SpeakerModel.topics)),
    )
    _, page_stmt = query.statements()
    sql = str(_compile(page_stmt))
    assert "lower(speakers.specialty) LIKE" in sql
    assert " OR EXISTS (SELECT 1" in sql
    assert "json_each(speakers.topics)" in sql
