"""Wall category model"""

from sqlalchemy import Column, String, Text, DateTime, Boolean, Index
from datetime import datetime
from category_tree.database.base import Base
import uuid


class WallCategory(Base):
    """Node of the two-level category tree (root or subcategory)"""

    __tablename__ = "wall_categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    # No FK constraint: imported data can hold dangling parent ids
    parent_category_id = Column(String(36), nullable=True, index=True)
    category_for = Column(String(50), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index('idx_wall_category_parent_active', 'parent_category_id', 'is_active'),
    )

    def __repr__(self):
        return f"<WallCategory(id={self.id}, name={self.name}, parent={self.parent_category_id})>"

    @property
    def is_root(self) -> bool:
        """Check if category is a root (no parent reference)"""
        return self.parent_category_id is None
