"""Persistence gateway for the category tree"""

from enum import Enum
import re
from typing import Iterable, List, Optional
from sqlalchemy import String, func
from sqlalchemy.exc import (
    DBAPIError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session
import logging

from category_tree.exceptions import (
    CategoryNotFoundException,
    DatabaseException,
    DuplicateNodeException,
    StoreUnavailableException,
)
from category_tree.models.chapter import Chapter
from category_tree.models.wall_category import WallCategory

logger = logging.getLogger(__name__)

# Driver messages for a missing table (PostgreSQL, MySQL, SQLite)
MISSING_TABLE_PATTERNS = (
    re.compile(r'relation "[^"]+" does not exist'),
    re.compile(r"table '[^']+' doesn't exist"),
    re.compile(r"no such table"),
)

# PostgreSQL undefined_table
UNDEFINED_TABLE_SQLSTATE = "42P01"

_UNSET = object()


class MatchMode(str, Enum):
    """Name matching policy for find-or-create lookups"""
    EXACT = "exact"
    CONTAINS = "contains"


def is_missing_table_error(error: Exception) -> bool:
    """Check whether a database error means the queried table is absent"""
    if isinstance(error, DBAPIError) and not isinstance(error, (ProgrammingError, OperationalError)):
        return False

    orig = getattr(error, "orig", None)
    if getattr(orig, "pgcode", None) == UNDEFINED_TABLE_SQLSTATE:
        return True

    message = str(orig or error).lower()
    return any(pattern.search(message) for pattern in MISSING_TABLE_PATTERNS)


def wrap_database_error(error: SQLAlchemyError) -> DatabaseException:
    """Translate an SQLAlchemy error into the tooling's exception hierarchy"""
    if isinstance(error, IntegrityError):
        return DuplicateNodeException(str(error.orig))
    if isinstance(error, (InterfaceError, DisconnectionError)):
        return StoreUnavailableException(str(error))
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return StoreUnavailableException(str(error))
    if isinstance(error, OperationalError) and not is_missing_table_error(error):
        return StoreUnavailableException(str(error))
    return DatabaseException(str(error))


def _name_filter(column, name: str, match_mode: MatchMode):
    normalized = name.strip().lower()
    if MatchMode(match_mode) == MatchMode.CONTAINS:
        return func.lower(column, type_=String).contains(normalized, autoescape=True)
    return func.lower(func.trim(column)) == normalized


class CategoryStore:
    """
    Data-access facade over wall categories and chapters

    Every write commits on its own. Failures roll the session back and are
    re-raised as DatabaseException subclasses.
    """

    def __init__(self, db: Session):
        self.db = db

    # Categories

    def _category_query(
        self,
        parent_id=_UNSET,
        roots_only: bool = False,
        active_only: bool = True,
        name: Optional[str] = None,
        match_mode: MatchMode = MatchMode.EXACT
    ):
        query = self.db.query(WallCategory)

        if roots_only:
            query = query.filter(WallCategory.parent_category_id.is_(None))
        elif parent_id is not _UNSET:
            if parent_id is None:
                query = query.filter(WallCategory.parent_category_id.is_(None))
            else:
                query = query.filter(WallCategory.parent_category_id == parent_id)

        if active_only:
            query = query.filter(WallCategory.is_active == True)

        if name is not None:
            query = query.filter(_name_filter(WallCategory.name, name, match_mode))

        return query

    def find_categories(
        self,
        *,
        parent_id=_UNSET,
        roots_only: bool = False,
        active_only: bool = True,
        name: Optional[str] = None,
        match_mode: MatchMode = MatchMode.EXACT,
        order_by_name: bool = True
    ) -> List[WallCategory]:
        """
        List categories

        Args:
            parent_id: Only children of this id (None means roots)
            roots_only: Only categories without a parent reference
            active_only: Skip inactive categories
            name: Name to match
            match_mode: Exact or substring matching, both case-insensitive
            order_by_name: Sort alphabetically

        Returns:
            Matching categories
        """
        try:
            query = self._category_query(parent_id, roots_only, active_only, name, match_mode)
            if order_by_name:
                query = query.order_by(WallCategory.name, WallCategory.id)
            return query.all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    def find_category(
        self,
        *,
        parent_id=_UNSET,
        roots_only: bool = False,
        active_only: bool = True,
        name: Optional[str] = None,
        match_mode: MatchMode = MatchMode.EXACT
    ) -> Optional[WallCategory]:
        """Return the first matching category or None"""
        try:
            query = self._category_query(parent_id, roots_only, active_only, name, match_mode)
            return query.order_by(WallCategory.created_at, WallCategory.id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    def get_category(self, category_id: str) -> Optional[WallCategory]:
        """Get category by id"""
        try:
            return self.db.query(WallCategory).filter(WallCategory.id == category_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    def create_category(
        self,
        name: str,
        description: Optional[str] = None,
        parent_id: Optional[str] = None
    ) -> WallCategory:
        """Insert an active category (root when parent_id is None)"""
        category = WallCategory(
            name=name,
            description=description,
            is_active=True,
            parent_category_id=parent_id
        )
        self._save(category)
        logger.info(f"Created category {category.name} ({category.id}) parent={parent_id}")
        return category

    def update_category(self, category_id: str, **fields) -> WallCategory:
        """
        Update category columns

        Raises:
            CategoryNotFoundException: Unknown id
        """
        category = self.get_category(category_id)
        if not category:
            raise CategoryNotFoundException(f"Category {category_id} not found")

        for key, value in fields.items():
            if not hasattr(WallCategory, key):
                raise ValueError(f"Unknown category field: {key}")
            setattr(category, key, value)

        self._save(category)
        logger.info(f"Updated category {category_id}: {sorted(fields)}")
        return category

    def count_children(self, category_id: str, active_only: bool = True) -> int:
        """Count subcategories of a category"""
        try:
            query = self.db.query(func.count(WallCategory.id)).filter(
                WallCategory.parent_category_id == category_id
            )
            if active_only:
                query = query.filter(WallCategory.is_active == True)
            return query.scalar() or 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    # Chapters

    def chapter_table_exists(self) -> bool:
        """
        Probe the chapter table with a single read

        Returns:
            False when the table is missing in this deployment
        """
        try:
            self.db.query(Chapter.id).first()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            if is_missing_table_error(e):
                logger.warning("Chapter table does not exist, chapter layer disabled")
                return False
            raise wrap_database_error(e) from e

    def _chapter_query(
        self,
        sub_category_id: Optional[str] = None,
        sub_category_ids: Optional[Iterable[str]] = None,
        active_only: bool = True,
        name: Optional[str] = None,
        match_mode: MatchMode = MatchMode.EXACT
    ):
        query = self.db.query(Chapter)

        if sub_category_id is not None:
            query = query.filter(Chapter.sub_category_id == sub_category_id)
        if sub_category_ids is not None:
            query = query.filter(Chapter.sub_category_id.in_(list(sub_category_ids)))
        if active_only:
            query = query.filter(Chapter.is_active == True)
        if name is not None:
            query = query.filter(_name_filter(Chapter.name, name, match_mode))

        return query

    def find_chapters(
        self,
        *,
        sub_category_id: Optional[str] = None,
        sub_category_ids: Optional[Iterable[str]] = None,
        active_only: bool = True,
        name: Optional[str] = None,
        match_mode: MatchMode = MatchMode.EXACT
    ) -> List[Chapter]:
        """List chapters sorted by order, then name"""
        if sub_category_ids is not None:
            sub_category_ids = list(sub_category_ids)
            if not sub_category_ids:
                return []

        try:
            query = self._chapter_query(sub_category_id, sub_category_ids, active_only, name, match_mode)
            return query.order_by(Chapter.order, Chapter.name).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    def find_chapter(
        self,
        *,
        sub_category_id: str,
        name: str,
        active_only: bool = True,
        match_mode: MatchMode = MatchMode.EXACT
    ) -> Optional[Chapter]:
        """Return the first matching chapter under a subcategory or None"""
        try:
            query = self._chapter_query(sub_category_id, None, active_only, name, match_mode)
            return query.order_by(Chapter.order, Chapter.name).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e

    def create_chapter(
        self,
        name: str,
        sub_category_id: str,
        order: int = 0,
        description: Optional[str] = None
    ) -> Chapter:
        """Insert an active chapter under a subcategory"""
        chapter = Chapter(
            name=name,
            sub_category_id=sub_category_id,
            order=order,
            description=description,
            is_active=True
        )
        self._save(chapter)
        logger.info(f"Created chapter {chapter.name} ({chapter.id}) under {sub_category_id}")
        return chapter

    def _save(self, obj) -> None:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise wrap_database_error(e) from e
