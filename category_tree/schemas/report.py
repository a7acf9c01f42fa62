"""Report and summary schemas"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class OrphanRecord(BaseModel):
    """Child category whose parent does not resolve to a root"""
    id: str
    name: str
    dangling_parent_id: str


class CategoryListing(BaseModel):
    """Category line for display"""
    id: str
    name: str
    parent_id: Optional[str] = None
    parent_name: Optional[str] = None


class RepairReport(BaseModel):
    """Result of a category tree scan"""
    include_inactive: bool = False
    applied_fix: bool = False
    root_count: int = 0
    child_count: int = 0
    orphan_count: int = 0
    roots: List[CategoryListing] = Field(default_factory=list)
    children: List[CategoryListing] = Field(default_factory=list)
    orphans: List[OrphanRecord] = Field(default_factory=list)
    fixed: List[str] = Field(default_factory=list)


class SeedItemKind(str, Enum):
    """Node type handled by the seeder"""
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    CHAPTER = "chapter"


class SeedItemStatus(str, Enum):
    """Outcome for a single declared node"""
    CREATED = "created"
    FOUND = "found"
    FAILED = "failed"
    SKIPPED = "skipped"


class SeedItemResult(BaseModel):
    """Outcome of one find-or-create step"""
    kind: SeedItemKind
    name: str
    parent: Optional[str] = None
    status: SeedItemStatus
    id: Optional[str] = None
    reason: Optional[str] = None


class SeedSummary(BaseModel):
    """Accumulated seeding outcome"""
    chapter_table_exists: bool = True
    items: List[SeedItemResult] = Field(default_factory=list)

    def count(self, kind: SeedItemKind, status: SeedItemStatus) -> int:
        return sum(1 for item in self.items if item.kind == kind and item.status == status)

    @property
    def categories_created(self) -> int:
        return self.count(SeedItemKind.CATEGORY, SeedItemStatus.CREATED)

    @property
    def categories_found(self) -> int:
        return self.count(SeedItemKind.CATEGORY, SeedItemStatus.FOUND)

    @property
    def subcategories_created(self) -> int:
        return self.count(SeedItemKind.SUBCATEGORY, SeedItemStatus.CREATED)

    @property
    def subcategories_found(self) -> int:
        return self.count(SeedItemKind.SUBCATEGORY, SeedItemStatus.FOUND)

    @property
    def chapters_created(self) -> int:
        return self.count(SeedItemKind.CHAPTER, SeedItemStatus.CREATED)

    @property
    def chapters_found(self) -> int:
        return self.count(SeedItemKind.CHAPTER, SeedItemStatus.FOUND)

    @property
    def chapters_failed(self) -> int:
        return self.count(SeedItemKind.CHAPTER, SeedItemStatus.FAILED)

    @property
    def chapters_skipped(self) -> int:
        return self.count(SeedItemKind.CHAPTER, SeedItemStatus.SKIPPED)

    @property
    def total_created(self) -> int:
        return sum(1 for item in self.items if item.status == SeedItemStatus.CREATED)

    @property
    def failures(self) -> List[SeedItemResult]:
        return [item for item in self.items if item.status == SeedItemStatus.FAILED]

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def structural_failures(self) -> List[SeedItemResult]:
        """Failed categories and subcategories"""
        return [item for item in self.failures if item.kind != SeedItemKind.CHAPTER]


class ChapterNode(BaseModel):
    """Chapter line in a tree report"""
    id: str
    name: str
    order: int


class SubcategoryNode(BaseModel):
    """Subcategory with its chapters"""
    id: str
    name: str
    chapters: List[ChapterNode] = Field(default_factory=list)

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)


class RootNode(BaseModel):
    """Root category with its subcategories"""
    id: str
    name: str
    subcategories: List[SubcategoryNode] = Field(default_factory=list)

    @property
    def subcategory_count(self) -> int:
        return len(self.subcategories)

    @property
    def chapter_count(self) -> int:
        return sum(sub.chapter_count for sub in self.subcategories)


class TreeReport(BaseModel):
    """Read-only nested view of the active tree"""
    chapter_table_exists: bool = True
    roots: List[RootNode] = Field(default_factory=list)
    missing_roots: List[str] = Field(default_factory=list)

    @property
    def root_count(self) -> int:
        return len(self.roots)

    @property
    def subcategory_count(self) -> int:
        return sum(root.subcategory_count for root in self.roots)

    @property
    def chapter_count(self) -> int:
        return sum(root.chapter_count for root in self.roots)


class ParentCategorySummary(BaseModel):
    """Root category listing with child count"""
    id: str
    name: str
    subcategory_count: int
    description: Optional[str] = None
