"""Read-only category tree reporting"""

from typing import Iterable, List, Optional
import logging

from category_tree.config import settings
from category_tree.schemas.report import (
    ChapterNode,
    ParentCategorySummary,
    RootNode,
    SubcategoryNode,
    TreeReport,
)
from category_tree.services.category_store import CategoryStore, MatchMode

logger = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_LENGTH = 60


class TreeReportService:
    """Nested counts over active roots, subcategories and chapters"""

    def __init__(self, store: CategoryStore, match_mode: Optional[MatchMode] = None):
        self.store = store
        self.match_mode = MatchMode(match_mode or settings.SEED_MATCH_MODE)

    def build_report(
        self,
        root_names: Optional[Iterable[str]] = None,
        include_chapters: bool = True
    ) -> TreeReport:
        """
        Build the tree view

        Args:
            root_names: Restrict to these roots, in the given order. All
                active roots (sorted by name) when omitted.
            include_chapters: Load chapters under each subcategory

        Returns:
            Tree report
        """
        chapters_enabled = include_chapters and self.store.chapter_table_exists()
        report = TreeReport(chapter_table_exists=chapters_enabled)

        if root_names is None:
            roots = self.store.find_categories(roots_only=True)
        else:
            roots = []
            for name in root_names:
                root = self.store.find_category(roots_only=True, name=name, match_mode=self.match_mode)
                if root is None:
                    logger.warning(f"Root category {name} not found")
                    report.missing_roots.append(name)
                elif root.id not in {r.id for r in roots}:
                    roots.append(root)

        for root in roots:
            node = RootNode(id=root.id, name=root.name)
            for subcategory in self.store.find_categories(parent_id=root.id):
                sub_node = SubcategoryNode(id=subcategory.id, name=subcategory.name)
                if chapters_enabled:
                    sub_node.chapters = [
                        ChapterNode(id=chapter.id, name=chapter.name, order=chapter.order)
                        for chapter in self.store.find_chapters(sub_category_id=subcategory.id)
                    ]
                node.subcategories.append(sub_node)
            report.roots.append(node)

        return report

    def list_parent_categories(self) -> List[ParentCategorySummary]:
        """Active roots with their active subcategory counts"""
        summaries = []
        for root in self.store.find_categories(roots_only=True):
            description = root.description
            if description and len(description) > DESCRIPTION_PREVIEW_LENGTH:
                description = description[:DESCRIPTION_PREVIEW_LENGTH] + "..."
            summaries.append(ParentCategorySummary(
                id=root.id,
                name=root.name,
                subcategory_count=self.store.count_children(root.id),
                description=description
            ))
        return summaries
