"""List parent categories"""

import argparse
from typing import List, Optional

from category_tree.commands import print_banner
from category_tree.database.session import SessionLocal
from category_tree.exceptions import CategoryTreeException
from category_tree.services.category_store import CategoryStore
from category_tree.services.tree_report import TreeReportService
from category_tree.utils.logger import setup_logging

WIDTH = 80


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    print_banner("All Parent Categories", width=WIDTH)

    db = session_factory()
    try:
        parents = TreeReportService(CategoryStore(db)).list_parent_categories()
    except CategoryTreeException as e:
        print(f"\n[ERROR] {e}")
        return 1
    finally:
        db.close()

    print(f"\nTotal Parent Categories: {len(parents)}\n")
    for index, parent in enumerate(parents, start=1):
        print(f"{index:>3}. {parent.name}")
        print(f"     ID: {parent.id}")
        print(f"     Subcategories: {parent.subcategory_count}")
        if parent.description:
            print(f"     Description: {parent.description}")
        print("")

    print("=" * WIDTH)
    print("\nSummary:")
    print(f"   Total Parent Categories: {len(parents)}")
    print(f"   Total Subcategories: {sum(p.subcategory_count for p in parents)}\n")
    return 0
