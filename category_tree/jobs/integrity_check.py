"""Periodic category tree integrity check"""

import logging
from typing import Any, Dict

from category_tree.config import settings
from category_tree.database.session import SessionLocal
from category_tree.services.category_store import CategoryStore
from category_tree.services.tree_repair import CategoryTreeRepairService

logger = logging.getLogger(__name__)


def check_category_tree(session_factory=SessionLocal) -> Dict[str, Any]:
    """
    Scan the category tree without fixing anything
    Run this on an interval via scheduler
    """
    db = session_factory()
    try:
        service = CategoryTreeRepairService(CategoryStore(db))
        report = service.scan_and_repair(
            apply_fix=False,
            include_inactive=settings.REPAIR_INCLUDE_INACTIVE
        )

        if report.orphans:
            for orphan in report.orphans:
                logger.warning(
                    f"Orphaned subcategory {orphan.name} ({orphan.id}) "
                    f"points to missing parent {orphan.dangling_parent_id}"
                )
        else:
            logger.info(f"Category tree is consistent ({report.root_count} roots, {report.child_count} children)")

        return {
            "status": "ok" if not report.orphans else "orphans_found",
            "roots": report.root_count,
            "children": report.child_count,
            "orphans": report.orphan_count
        }

    except Exception as e:
        logger.error(f"Integrity check failed: {str(e)}")
        return {"status": "error", "error": str(e)}
    finally:
        db.close()
