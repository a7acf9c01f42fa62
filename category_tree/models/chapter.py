"""Chapter model"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, UniqueConstraint
from datetime import datetime
from category_tree.database.base import Base
import uuid


class Chapter(Base):
    """Leaf node under a subcategory"""

    __tablename__ = "chapters"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    sub_category_id = Column(
        String(36),
        ForeignKey("wall_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    order = Column(Integer, default=0, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint('sub_category_id', 'name', name='uq_chapter_subcategory_name'),
    )

    def __repr__(self):
        return f"<Chapter(id={self.id}, name={self.name}, order={self.order})>"
