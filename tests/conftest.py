"""Pytest configuration and fixtures"""

import os

# Keep the module-level engine off the production database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from category_tree.database.base import Base
from category_tree.models import Chapter, WallCategory
from category_tree.services.category_store import CategoryStore

# Test database URL
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def engine():
    """In-memory engine shared across sessions of one test"""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def legacy_engine():
    """Separate in-memory engine for the schema without chapters"""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    """Session factory bound to a schema with both tables"""
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def legacy_session_factory(legacy_engine):
    """Session factory bound to a schema without the chapters table"""
    Base.metadata.create_all(bind=legacy_engine, tables=[WallCategory.__table__])
    return sessionmaker(autocommit=False, autoflush=False, bind=legacy_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Database session fixture"""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def legacy_db(legacy_session_factory):
    """Session for a deployment without chapters"""
    db = legacy_session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(db):
    return CategoryStore(db)


@pytest.fixture
def legacy_store(legacy_db):
    return CategoryStore(legacy_db)


@pytest.fixture
def add_category(db):
    """Insert a category row directly, bypassing the store"""
    def _add(name, parent_id=None, is_active=True, category_id=None, description=None):
        category = WallCategory(
            name=name,
            parent_category_id=parent_id,
            is_active=is_active,
            description=description
        )
        if category_id:
            category.id = category_id
        db.add(category)
        db.commit()
        db.refresh(category)
        return category
    return _add


@pytest.fixture
def add_chapter(db):
    """Insert a chapter row directly"""
    def _add(name, sub_category_id, order=0, is_active=True):
        chapter = Chapter(name=name, sub_category_id=sub_category_id, order=order, is_active=is_active)
        db.add(chapter)
        db.commit()
        db.refresh(chapter)
        return chapter
    return _add
