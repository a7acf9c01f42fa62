"""Idempotent seeding of category hierarchies"""

from typing import Any, Dict, Iterable, List, Optional, Union
from pydantic import ValidationError
import logging

from category_tree.config import settings
from category_tree.exceptions import (
    DatabaseException,
    DuplicateNodeException,
    SeedStructureException,
    StoreUnavailableException,
)
from category_tree.models.wall_category import WallCategory
from category_tree.schemas.report import SeedItemKind, SeedItemResult, SeedItemStatus, SeedSummary
from category_tree.schemas.seed import ChapterSpec, RootSpec, SubcategorySpec
from category_tree.services.category_store import CategoryStore, MatchMode

logger = logging.getLogger(__name__)

CHAPTER_TABLE_MISSING = "chapter table does not exist"
INACTIVE_CHAPTER = "existing chapter is inactive"


def load_structure(structure: Iterable[Union[RootSpec, dict]]) -> List[RootSpec]:
    """
    Validate a declarative structure

    Raises:
        SeedStructureException: Invalid entry
    """
    roots = []
    for index, entry in enumerate(structure):
        if isinstance(entry, RootSpec):
            roots.append(entry)
            continue
        try:
            roots.append(RootSpec.model_validate(entry))
        except ValidationError as e:
            raise SeedStructureException(f"Invalid root entry #{index}: {e}") from e
    return roots


class HierarchySeeder:
    """
    Ensures declared category -> subcategory -> chapter trees exist

    Nodes are matched by name within their parent, so running the same
    structure twice creates nothing the second time. Existing nodes are
    never modified.
    """

    def __init__(self, store: CategoryStore, match_mode: Optional[Union[MatchMode, str]] = None):
        self.store = store
        self.match_mode = MatchMode(match_mode or settings.SEED_MATCH_MODE)

    def seed(self, structure: Iterable[Union[RootSpec, dict]]) -> SeedSummary:
        """
        Create the missing nodes of a structure

        Args:
            structure: Root entries (RootSpec or equivalent dicts)

        Returns:
            Per-item results and counters

        Raises:
            StoreUnavailableException: Database unreachable
            SeedStructureException: Invalid structure
        """
        roots = load_structure(structure)

        chapters_enabled = self.store.chapter_table_exists()
        summary = SeedSummary(chapter_table_exists=chapters_enabled)

        for root_spec in roots:
            try:
                self._seed_root(root_spec, chapters_enabled, summary)
            except StoreUnavailableException:
                raise
            except DatabaseException as e:
                logger.error(f"Failed to seed category {root_spec.name}: {e}")
                summary.items.append(SeedItemResult(
                    kind=SeedItemKind.CATEGORY,
                    name=root_spec.name,
                    status=SeedItemStatus.FAILED,
                    reason=str(e)
                ))

        logger.info(
            f"Seeding finished: {summary.total_created} created, "
            f"{len(summary.failures)} failed"
        )
        return summary

    def _seed_root(self, root_spec: RootSpec, chapters_enabled: bool, summary: SeedSummary) -> None:
        root = self._find_or_create_category(
            SeedItemKind.CATEGORY,
            root_spec.name,
            root_spec.description or f"Comprehensive coverage of {root_spec.name}",
            None,
            summary
        )

        branches = [
            (sub_spec, f"Subcategory under {root.name}")
            for sub_spec in root_spec.subcategories
        ]
        if root_spec.chapters:
            # Chapters cannot hang off a root
            default_spec = SubcategorySpec(
                name=root_spec.default_subcategory_name,
                chapters=root_spec.chapters
            )
            branches.append((default_spec, f"Default subcategory for {root.name}"))

        for sub_spec, description in branches:
            try:
                subcategory = self._find_or_create_category(
                    SeedItemKind.SUBCATEGORY,
                    sub_spec.name,
                    description,
                    root,
                    summary
                )
            except StoreUnavailableException:
                raise
            except DatabaseException as e:
                logger.error(f"Failed to seed subcategory {sub_spec.name} under {root.name}: {e}")
                summary.items.append(SeedItemResult(
                    kind=SeedItemKind.SUBCATEGORY,
                    name=sub_spec.name,
                    parent=root.name,
                    status=SeedItemStatus.FAILED,
                    reason=str(e)
                ))
                continue

            self._seed_chapters(subcategory, sub_spec.chapters, chapters_enabled, summary)

    def _find_or_create_category(
        self,
        kind: SeedItemKind,
        name: str,
        description: str,
        parent: Optional[WallCategory],
        summary: SeedSummary
    ) -> WallCategory:
        parent_id = parent.id if parent else None

        node = self.store.find_category(parent_id=parent_id, name=name, match_mode=self.match_mode)
        status = SeedItemStatus.FOUND

        if not node:
            try:
                node = self.store.create_category(name, description=description, parent_id=parent_id)
                status = SeedItemStatus.CREATED
            except DuplicateNodeException:
                # Created concurrently, read it back
                node = self.store.find_category(parent_id=parent_id, name=name, match_mode=self.match_mode)
                if not node:
                    raise

        summary.items.append(SeedItemResult(
            kind=kind,
            name=node.name,
            parent=parent.name if parent else None,
            status=status,
            id=node.id
        ))
        return node

    def _seed_chapters(
        self,
        subcategory: WallCategory,
        chapter_specs: List[ChapterSpec],
        chapters_enabled: bool,
        summary: SeedSummary
    ) -> None:
        for chapter_spec in chapter_specs:
            if not chapters_enabled:
                summary.items.append(SeedItemResult(
                    kind=SeedItemKind.CHAPTER,
                    name=chapter_spec.name,
                    parent=subcategory.name,
                    status=SeedItemStatus.SKIPPED,
                    reason=CHAPTER_TABLE_MISSING
                ))
                continue

            try:
                summary.items.append(self._find_or_create_chapter(subcategory, chapter_spec))
            except StoreUnavailableException:
                raise
            except DatabaseException as e:
                logger.warning(f"Could not create chapter {chapter_spec.name!r}: {e}")
                summary.items.append(SeedItemResult(
                    kind=SeedItemKind.CHAPTER,
                    name=chapter_spec.name,
                    parent=subcategory.name,
                    status=SeedItemStatus.FAILED,
                    reason=str(e)
                ))

    def _find_or_create_chapter(self, subcategory: WallCategory, chapter_spec: ChapterSpec) -> SeedItemResult:
        chapter = self.store.find_chapter(
            sub_category_id=subcategory.id,
            name=chapter_spec.name,
            match_mode=self.match_mode
        )
        status = SeedItemStatus.FOUND
        reason = None

        if not chapter:
            try:
                chapter = self.store.create_chapter(
                    chapter_spec.name,
                    sub_category_id=subcategory.id,
                    order=chapter_spec.order
                )
                status = SeedItemStatus.CREATED
            except DuplicateNodeException:
                # The unique constraint also covers inactive chapters
                chapter = self.store.find_chapter(
                    sub_category_id=subcategory.id,
                    name=chapter_spec.name,
                    active_only=False,
                    match_mode=self.match_mode
                )
                if not chapter:
                    raise
                if not chapter.is_active:
                    logger.info(f"Chapter {chapter.name!r} exists but is inactive, leaving it as is")
                    reason = INACTIVE_CHAPTER

        return SeedItemResult(
            kind=SeedItemKind.CHAPTER,
            name=chapter.name,
            parent=subcategory.name,
            status=status,
            id=chapter.id,
            reason=reason
        )


def summarize_structure(structure: Iterable[Union[RootSpec, dict]]) -> Dict[str, Any]:
    """Count declared nodes, implicit default subcategories included"""
    roots = load_structure(structure)
    subcategories = sum(len(r.subcategories) + (1 if r.chapters else 0) for r in roots)
    chapters = sum(
        len(r.chapters) + sum(len(s.chapters) for s in r.subcategories)
        for r in roots
    )
    return {"categories": len(roots), "subcategories": subcategories, "chapters": chapters}
