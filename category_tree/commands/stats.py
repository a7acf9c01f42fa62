"""Print category statistics"""

import argparse
from typing import List, Optional

from category_tree.commands import print_banner
from category_tree.database.session import SessionLocal
from category_tree.exceptions import CategoryTreeException
from category_tree.schemas.report import TreeReport
from category_tree.services.category_store import CategoryStore
from category_tree.services.tree_report import TreeReportService
from category_tree.utils.logger import setup_logging


def print_stats(report: TreeReport) -> None:
    print(f"\nTotal Categories: {report.root_count}")
    if not report.chapter_table_exists:
        print("[!] Chapter table does not exist in database")

    for root in report.roots:
        print(f"\nCategory: {root.name} (ID: {root.id})")
        print(f"   Subcategories: {root.subcategory_count}")
        for sub in root.subcategories:
            print(f"      - {sub.name} (ID: {sub.id})")
            if sub.chapter_count:
                print(f"        Chapters: {sub.chapter_count}")
        if root.chapter_count:
            print(f"   Total Chapters: {root.chapter_count}")

    print("\n" + "=" * 60)
    print("\nSummary:")
    print(f"   Total Categories: {report.root_count}")
    print(f"   Total Subcategories: {report.subcategory_count}")
    print(f"   Total Chapters: {report.chapter_count}\n")


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    print_banner("Category Statistics")

    db = session_factory()
    try:
        report = TreeReportService(CategoryStore(db)).build_report()
        print_stats(report)
        return 0
    except CategoryTreeException as e:
        print(f"\n[ERROR] {e}")
        return 1
    finally:
        db.close()
