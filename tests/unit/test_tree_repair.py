"""Test category tree repair"""

import pytest

from category_tree.exceptions import StoreUnavailableException
from category_tree.models import WallCategory
from category_tree.services.tree_repair import CategoryTreeRepairService


def snapshot(db):
    rows = db.query(WallCategory).order_by(WallCategory.id).all()
    return [(r.id, r.name, r.parent_category_id, r.is_active, r.updated_at) for r in rows]


def test_detects_orphan_without_writing(db, store, add_category):
    """A dangling parent reference is reported, nothing is changed"""
    geography = add_category("Geography")
    add_category("Physical", parent_id=geography.id)
    fake = add_category("Fake", parent_id="does-not-exist")
    before = snapshot(db)

    report = CategoryTreeRepairService(store).scan_and_repair(apply_fix=False)

    assert report.root_count == 1
    assert report.child_count == 2
    assert report.orphan_count == 1
    assert report.orphans[0].id == fake.id
    assert report.orphans[0].name == "Fake"
    assert report.orphans[0].dangling_parent_id == "does-not-exist"
    assert report.fixed == []
    assert snapshot(db) == before


def test_fix_promotes_orphans_and_converges(db, store, add_category):
    """Fixing clears the parent reference, a second run finds nothing"""
    add_category("Geography")
    fake = add_category("Fake", parent_id="does-not-exist")
    service = CategoryTreeRepairService(store)

    first = service.scan_and_repair(apply_fix=True)
    assert first.fixed == [fake.id]

    db.expire_all()
    assert db.query(WallCategory).filter(WallCategory.id == fake.id).one().parent_category_id is None

    second = service.scan_and_repair(apply_fix=True)
    assert second.orphan_count == 0
    assert second.fixed == []
    assert second.root_count == 2


def test_each_orphan_reported_once(store, add_category):
    """Siblings under the same missing parent are listed individually"""
    add_category("A", parent_id="gone")
    add_category("B", parent_id="gone")
    add_category("C", parent_id="also-gone")

    report = CategoryTreeRepairService(store).scan_and_repair()

    ids = [orphan.id for orphan in report.orphans]
    assert len(ids) == 3
    assert len(set(ids)) == 3


def test_child_of_child_is_orphan(store, add_category):
    """Parents must be roots; deeper nesting is not resolvable"""
    root = add_category("Geography")
    child = add_category("Physical", parent_id=root.id)
    grandchild = add_category("Soil", parent_id=child.id)

    report = CategoryTreeRepairService(store).scan_and_repair()

    assert [orphan.id for orphan in report.orphans] == [grandchild.id]


def test_active_only_scope(store, add_category):
    """Inactive roots do not satisfy references unless inactive rows are inspected"""
    retired = add_category("Retired", is_active=False)
    child = add_category("Still Active", parent_id=retired.id)
    add_category("Hidden Orphan", parent_id="gone", is_active=False)
    service = CategoryTreeRepairService(store)

    active_only = service.scan_and_repair()
    assert [orphan.id for orphan in active_only.orphans] == [child.id]
    assert active_only.include_inactive is False

    everything = service.scan_and_repair(include_inactive=True)
    assert [orphan.name for orphan in everything.orphans] == ["Hidden Orphan"]
    assert everything.include_inactive is True


def test_listing_resolves_parent_names(store, add_category):
    root = add_category("Geography")
    add_category("Physical", parent_id=root.id)
    add_category("Lost", parent_id="gone")

    report = CategoryTreeRepairService(store).scan_and_repair()

    parents = {child.name: child.parent_name for child in report.children}
    assert parents == {"Lost": None, "Physical": "Geography"}


def test_clean_tree(store, add_category):
    root = add_category("Geography")
    add_category("Physical", parent_id=root.id)

    report = CategoryTreeRepairService(store).scan_and_repair(apply_fix=True)

    assert report.orphan_count == 0
    assert report.fixed == []


def test_store_unavailable_aborts(store, monkeypatch):
    """Connectivity errors propagate without a report"""
    def unavailable(**kwargs):
        raise StoreUnavailableException("connection refused")

    monkeypatch.setattr(store, "find_categories", unavailable)

    with pytest.raises(StoreUnavailableException):
        CategoryTreeRepairService(store).scan_and_repair(apply_fix=True)
