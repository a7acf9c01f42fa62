"""Print the seeded tree for one or more structures"""

import argparse
from typing import List, Optional

from category_tree.commands import print_banner
from category_tree.database.session import SessionLocal
from category_tree.exceptions import CategoryTreeException
from category_tree.schemas.report import TreeReport
from category_tree.seeds import available_structures, get_structure
from category_tree.services.category_store import CategoryStore
from category_tree.services.tree_report import TreeReportService
from category_tree.utils.logger import setup_logging

WIDTH = 70


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Verify seeded category structures")
    parser.add_argument("structures", nargs="*", help="Seed structure slugs")
    parser.add_argument("--all", action="store_true", help="Verify every registered structure")
    return parser


def print_tree(report: TreeReport) -> None:
    for name in report.missing_roots:
        print(f"\n[!] {name} category not found!")

    for root in report.roots:
        print(f"\n{root.name}")
        print("-" * WIDTH)
        for sub in root.subcategories:
            print(f"\n  {sub.name} ({sub.chapter_count} chapters)")
            for index, chapter in enumerate(sub.chapters, start=1):
                print(f"     {index}. {chapter.name}")
        print(f"\n  Total: {root.subcategory_count} subcategories, {root.chapter_count} chapters")

    if not report.chapter_table_exists:
        print("\n[!] Chapter table does not exist, chapters not listed")


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    slugs = available_structures() if args.all else args.structures
    if not slugs:
        parser.print_usage()
        print("\n[ERROR] Name at least one structure or pass --all")
        return 1

    print_banner("Category Structure Verification", width=WIDTH)

    db = session_factory()
    try:
        root_names = [root.name for slug in slugs for root in get_structure(slug)]
        report = TreeReportService(CategoryStore(db)).build_report(root_names=root_names)
        print_tree(report)
        print("\n" + "=" * WIDTH)
        print("\n[SUCCESS] Verification complete\n")
        return 0
    except CategoryTreeException as e:
        print(f"\n[ERROR] {e}")
        return 1
    finally:
        db.close()
