"""Test scheduled integrity check"""

from category_tree.commands.monitor import build_scheduler
from category_tree.jobs.integrity_check import check_category_tree
from category_tree.models import WallCategory


def add(session_factory, **fields):
    db = session_factory()
    try:
        db.add(WallCategory(**fields))
        db.commit()
    finally:
        db.close()


def test_clean_tree(session_factory):
    add(session_factory, name="Geography")

    result = check_category_tree(session_factory)

    assert result == {"status": "ok", "roots": 1, "children": 0, "orphans": 0}


def test_orphans_reported_not_fixed(session_factory, caplog):
    add(session_factory, name="Fake", parent_category_id="gone")

    result = check_category_tree(session_factory)

    assert result["status"] == "orphans_found"
    assert result["orphans"] == 1
    assert "Orphaned subcategory Fake" in caplog.text

    db = session_factory()
    try:
        assert db.query(WallCategory).one().parent_category_id == "gone"
    finally:
        db.close()


def test_failure_returns_error_status(engine):
    """Missing schema is logged and reported, not raised"""
    from sqlalchemy.orm import sessionmaker

    empty_factory = sessionmaker(bind=engine)

    result = check_category_tree(empty_factory)

    assert result["status"] == "error"
    assert "wall_categories" in result["error"]


def test_scheduler_registers_job():
    scheduler = build_scheduler(15)

    job = scheduler.get_job("category_tree_integrity")
    assert job is not None
    assert job.func is check_category_tree
    assert job.trigger.interval.total_seconds() == 15 * 60
