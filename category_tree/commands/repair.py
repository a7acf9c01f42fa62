"""Detect and fix orphaned wall subcategories"""

import argparse
from typing import List, Optional

from category_tree.commands import print_banner
from category_tree.config import settings
from category_tree.database.session import SessionLocal
from category_tree.exceptions import CategoryTreeException
from category_tree.schemas.report import RepairReport
from category_tree.services.category_store import CategoryStore
from category_tree.services.tree_repair import CategoryTreeRepairService
from category_tree.utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find subcategories whose parent category does not exist"
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Promote orphaned subcategories to root categories"
    )
    parser.add_argument(
        "--include-inactive",
        action="store_true",
        default=settings.REPAIR_INCLUDE_INACTIVE,
        help="Inspect inactive categories too"
    )
    return parser


def print_report(report: RepairReport) -> None:
    """Print scan results"""
    scope = "all" if report.include_inactive else "active"
    print(f"\nFound {report.root_count + report.child_count} {scope} categories\n")

    print("Statistics:")
    print(f"  - Parent categories: {report.root_count}")
    print(f"  - Sub-categories: {report.child_count}")

    print("\nParent categories:")
    for root in report.roots:
        print(f"  - {root.name} (ID: {root.id})")

    print("\nSub-categories:")
    for child in report.children:
        parent_name = child.parent_name or "NOT FOUND"
        print(f"  - {child.name} (ID: {child.id}) -> Parent: {parent_name} ({child.parent_id})")

    if not report.orphans:
        print("\n[OK] No orphaned sub-categories")
        return

    print(f"\n[!] Found {report.orphan_count} orphaned sub-categories (parent doesn't exist):")
    for orphan in report.orphans:
        print(f"  - {orphan.name} (ID: {orphan.id}) -> Parent ID: {orphan.dangling_parent_id} (NOT FOUND)")

    if report.applied_fix:
        print("\nFixed orphaned categories by clearing their parent reference:")
        fixed = set(report.fixed)
        for orphan in report.orphans:
            if orphan.id in fixed:
                print(f"  [OK] Fixed: {orphan.name}")
    else:
        print("\nRun with --fix to promote orphaned categories to parents")


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    args = build_parser().parse_args(argv)

    print_banner("Checking wall categories")

    db = session_factory()
    try:
        service = CategoryTreeRepairService(CategoryStore(db))
        report = service.scan_and_repair(apply_fix=args.fix, include_inactive=args.include_inactive)
        print_report(report)
        print("\n[SUCCESS] Analysis complete\n")
        return 0
    except CategoryTreeException as e:
        print(f"\n[ERROR] {e}")
        return 1
    finally:
        db.close()
