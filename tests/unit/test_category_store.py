"""Test persistence gateway"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, ProgrammingError

from category_tree.exceptions import (
    CategoryNotFoundException,
    DatabaseException,
    DuplicateNodeException,
    StoreUnavailableException,
)
from category_tree.services.category_store import (
    CategoryStore,
    MatchMode,
    is_missing_table_error,
    wrap_database_error,
)


def test_exact_match_is_case_insensitive_and_trimmed(store, add_category):
    """Exact matching ignores case and surrounding whitespace"""
    root = add_category("Indian Geography")

    found = store.find_category(roots_only=True, name="  indian GEOGRAPHY ")
    assert found.id == root.id

    assert store.find_category(roots_only=True, name="Geography") is None


def test_contains_match_finds_substring(store, add_category):
    """Legacy substring matching"""
    root = add_category("Indian Geography (Prelims)")

    found = store.find_category(roots_only=True, name="indian geography", match_mode=MatchMode.CONTAINS)
    assert found.id == root.id
    assert store.find_category(roots_only=True, name="indian geography") is None


def test_contains_match_escapes_wildcards(store, add_category):
    """Percent and underscore in names are literal"""
    add_category("Growth 100% Rate")

    assert store.find_category(name="100%", match_mode="contains") is not None
    assert store.find_category(name="1_0", match_mode="contains") is None


def test_find_categories_filters_by_parent(store, add_category):
    """Parent filter scopes lookups"""
    geography = add_category("Geography")
    history = add_category("History")
    add_category("Maps", parent_id=geography.id)
    history_maps = add_category("Maps", parent_id=history.id)

    found = store.find_category(parent_id=history.id, name="Maps")
    assert found.id == history_maps.id

    roots = store.find_categories(roots_only=True)
    assert [r.name for r in roots] == ["Geography", "History"]

    assert store.find_category(parent_id=None, name="Maps") is None


def test_find_categories_skips_inactive_by_default(store, add_category):
    """Inactive categories only show up when asked for"""
    add_category("Active")
    add_category("Retired", is_active=False)

    assert [c.name for c in store.find_categories()] == ["Active"]
    assert [c.name for c in store.find_categories(active_only=False)] == ["Active", "Retired"]


def test_create_and_update_category(store):
    """Create a child and promote it to root"""
    root = store.create_category("Polity", description="Polity root")
    child = store.create_category("Constitution", parent_id=root.id)

    assert child.is_active is True
    assert child.parent_category_id == root.id

    updated = store.update_category(child.id, parent_category_id=None)
    assert updated.parent_category_id is None
    assert updated.is_root


def test_update_unknown_category(store):
    """Unknown ids raise"""
    with pytest.raises(CategoryNotFoundException):
        store.update_category("missing", parent_category_id=None)


def test_update_rejects_unknown_field(store, add_category):
    category = add_category("Polity")

    with pytest.raises(ValueError):
        store.update_category(category.id, colour="red")


def test_count_children(store, add_category):
    root = add_category("Economy")
    add_category("Basics", parent_id=root.id)
    add_category("Banking", parent_id=root.id)
    add_category("Old", parent_id=root.id, is_active=False)

    assert store.count_children(root.id) == 2
    assert store.count_children(root.id, active_only=False) == 3


def test_chapter_table_probe(store, legacy_store):
    """Probe reports whether chapters are available"""
    assert store.chapter_table_exists() is True
    assert legacy_store.chapter_table_exists() is False


def test_legacy_store_keeps_working_after_probe(legacy_store):
    """A failed probe does not poison the session"""
    assert legacy_store.chapter_table_exists() is False

    root = legacy_store.create_category("Geography")
    assert legacy_store.find_category(roots_only=True, name="Geography").id == root.id


def test_find_chapters_sorted_by_order_then_name(store, add_category, add_chapter):
    """Chapters come back by order, ties broken by name"""
    sub = add_category("Physical", parent_id=add_category("Geography").id)
    add_chapter("Soil", sub.id, order=2)
    add_chapter("Climate", sub.id, order=2)
    add_chapter("Earth", sub.id, order=1)
    add_chapter("Hidden", sub.id, order=0, is_active=False)

    chapters = store.find_chapters(sub_category_id=sub.id)
    assert [c.name for c in chapters] == ["Earth", "Climate", "Soil"]


def test_find_chapters_by_many_parents(store, add_category, add_chapter):
    root = add_category("Geography")
    first = add_category("Physical", parent_id=root.id)
    second = add_category("Human", parent_id=root.id)
    add_chapter("Soil", first.id, order=1)
    add_chapter("Migration", second.id, order=1)

    assert len(store.find_chapters(sub_category_ids=[first.id, second.id])) == 2
    assert store.find_chapters(sub_category_ids=[]) == []


def test_find_chapter_scoped_to_subcategory(store, add_category, add_chapter):
    root = add_category("Geography")
    first = add_category("Physical", parent_id=root.id)
    second = add_category("Human", parent_id=root.id)
    add_chapter("Soil", first.id)

    assert store.find_chapter(sub_category_id=first.id, name="soil") is not None
    assert store.find_chapter(sub_category_id=second.id, name="soil") is None


def test_duplicate_chapter_raises(store, add_category):
    """Unique (subcategory, name) constraint surfaces as DuplicateNodeException"""
    sub = add_category("Physical", parent_id=add_category("Geography").id)
    store.create_chapter("Soil", sub.id, order=1)

    with pytest.raises(DuplicateNodeException):
        store.create_chapter("Soil", sub.id, order=2)

    # Session is usable after the rollback
    assert len(store.find_chapters(sub_category_id=sub.id)) == 1


def test_missing_table_detection():
    assert is_missing_table_error(Exception('relation "chapters" does not exist'))
    assert is_missing_table_error(Exception("no such table: chapters"))
    assert is_missing_table_error(Exception("Table 'platform.chapters' doesn't exist"))
    assert not is_missing_table_error(Exception("could not connect to server"))


def test_wrap_database_error_classification():
    """Connectivity problems are fatal, the rest are ordinary database errors"""
    unreachable = OperationalError("SELECT 1", {}, Exception("could not connect to server"))
    missing = ProgrammingError("SELECT 1", {}, Exception('relation "chapters" does not exist'))
    duplicate = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    assert isinstance(wrap_database_error(unreachable), StoreUnavailableException)

    wrapped = wrap_database_error(missing)
    assert isinstance(wrapped, DatabaseException)
    assert not isinstance(wrapped, StoreUnavailableException)

    assert isinstance(wrap_database_error(duplicate), DuplicateNodeException)


def test_chapter_probe_propagates_other_errors(db, monkeypatch):
    """Only a missing table is treated as feature absent"""
    store = CategoryStore(db)

    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("server closed the connection unexpectedly"))

    monkeypatch.setattr(db, "query", broken_query)

    with pytest.raises(StoreUnavailableException):
        store.chapter_table_exists()


def test_missing_database_is_not_a_missing_table():
    """Unknown database or role errors mention 'does not exist' but are connectivity failures"""
    no_database = OperationalError(None, None, Exception('FATAL:  database "platform" does not exist'))
    no_role = OperationalError(None, None, Exception('FATAL:  role "admin" does not exist'))

    assert not is_missing_table_error(no_database)
    assert not is_missing_table_error(no_role)
    assert isinstance(wrap_database_error(no_database), StoreUnavailableException)
    assert isinstance(wrap_database_error(no_role), StoreUnavailableException)


def test_missing_table_detected_by_sqlstate():
    class UndefinedTable(Exception):
        pgcode = "42P01"

    error = ProgrammingError("SELECT", {}, UndefinedTable("undefined table"))
    assert is_missing_table_error(error)


def test_chapter_probe_fails_on_missing_database(db, monkeypatch):
    """The chapter layer is not disabled when the database itself is unreachable"""
    store = CategoryStore(db)

    def broken_query(*args, **kwargs):
        raise OperationalError(None, None, Exception('FATAL:  database "platform" does not exist'))

    monkeypatch.setattr(db, "query", broken_query)

    with pytest.raises(StoreUnavailableException):
        store.chapter_table_exists()
