"""Database models package"""

from category_tree.models.wall_category import WallCategory
from category_tree.models.chapter import Chapter

__all__ = [
    "WallCategory",
    "Chapter"
]
