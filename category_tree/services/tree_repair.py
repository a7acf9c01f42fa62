"""Category tree repair service"""

import logging

from category_tree.schemas.report import CategoryListing, OrphanRecord, RepairReport
from category_tree.services.category_store import CategoryStore

logger = logging.getLogger(__name__)


class CategoryTreeRepairService:
    """Detects subcategories whose parent is not an existing root"""

    def __init__(self, store: CategoryStore):
        self.store = store

    def scan_and_repair(self, apply_fix: bool = False, include_inactive: bool = False) -> RepairReport:
        """
        Scan the category tree and optionally promote orphans to roots

        Args:
            apply_fix: Clear the dangling parent reference of every orphan
            include_inactive: Inspect inactive categories too; inactive roots
                then also count as valid parents

        Returns:
            Scan report, with the ids changed in `fixed` when apply_fix is set
        """
        categories = self.store.find_categories(active_only=not include_inactive)

        roots = [cat for cat in categories if cat.parent_category_id is None]
        children = [cat for cat in categories if cat.parent_category_id is not None]
        roots_by_id = {root.id: root for root in roots}

        report = RepairReport(
            include_inactive=include_inactive,
            applied_fix=apply_fix,
            root_count=len(roots),
            child_count=len(children),
            roots=[CategoryListing(id=root.id, name=root.name) for root in roots]
        )

        for child in children:
            parent = roots_by_id.get(child.parent_category_id)
            report.children.append(CategoryListing(
                id=child.id,
                name=child.name,
                parent_id=child.parent_category_id,
                parent_name=parent.name if parent else None
            ))
            if parent is None:
                report.orphans.append(OrphanRecord(
                    id=child.id,
                    name=child.name,
                    dangling_parent_id=child.parent_category_id
                ))

        report.orphan_count = len(report.orphans)

        if report.orphans:
            logger.warning(f"Found {report.orphan_count} orphaned subcategories")
        else:
            logger.info(f"No orphaned subcategories among {report.child_count} children")

        if apply_fix:
            for orphan in report.orphans:
                self.store.update_category(orphan.id, parent_category_id=None)
                report.fixed.append(orphan.id)
                logger.info(
                    f"Promoted orphan {orphan.name} ({orphan.id}) to root, "
                    f"dropped parent {orphan.dangling_parent_id}"
                )

        return report
