"""Seed category hierarchies for one or more knowledge domains"""

import argparse
from typing import List, Optional

from category_tree.commands import print_banner
from category_tree.config import settings
from category_tree.database.session import SessionLocal
from category_tree.exceptions import CategoryTreeException
from category_tree.schemas.report import SeedItemKind, SeedItemStatus, SeedSummary
from category_tree.seeds import available_structures, get_structure
from category_tree.services.category_store import CategoryStore, MatchMode
from category_tree.services.hierarchy_seeder import HierarchySeeder, summarize_structure
from category_tree.utils.logger import setup_logging

INDENT = {
    SeedItemKind.CATEGORY: "  ",
    SeedItemKind.SUBCATEGORY: "    ",
    SeedItemKind.CHAPTER: "      ",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create missing categories, subcategories and chapters")
    parser.add_argument("structures", nargs="*", help="Seed structure slugs")
    parser.add_argument("--all", action="store_true", help="Seed every registered structure")
    parser.add_argument("--list", action="store_true", help="List registered structures and exit")
    parser.add_argument(
        "--match",
        choices=[mode.value for mode in MatchMode],
        default=settings.SEED_MATCH_MODE,
        help="Name matching used to find existing nodes"
    )
    return parser


def print_summary(summary: SeedSummary) -> None:
    """Print per-item progress and totals"""
    if not summary.chapter_table_exists:
        print("  [!] Chapter table does not exist, creating categories and subcategories only")

    for item in summary.items:
        indent = INDENT[item.kind]
        if item.status == SeedItemStatus.CREATED:
            print(f"{indent}[OK] Created {item.kind.value}: {item.name}")
        elif item.status == SeedItemStatus.FOUND:
            print(f"{indent}[=] Found {item.kind.value}: {item.name}")
        elif item.status == SeedItemStatus.FAILED:
            print(f"{indent}[!] Could not create {item.kind.value} \"{item.name}\": {item.reason}")

    print("\nSummary:")
    print(f"   Categories created: {summary.categories_created}")
    print(f"   Categories found: {summary.categories_found}")
    print(f"   Subcategories created: {summary.subcategories_created}")
    print(f"   Subcategories found: {summary.subcategories_found}")
    if summary.chapter_table_exists:
        print(f"   Chapters created: {summary.chapters_created}")
        print(f"   Chapters found: {summary.chapters_found}")
        if summary.chapters_failed:
            print(f"   Chapters failed: {summary.chapters_failed}")
    else:
        print(f"   [!] Chapters: table doesn't exist, {summary.chapters_skipped} skipped (need to run migration)")
    if summary.has_failures:
        print(f"   [!] {len(summary.failures)} item(s) failed, see above")


def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for slug in available_structures():
            print(slug)
        return 0

    slugs = available_structures() if args.all else args.structures
    if not slugs:
        parser.print_usage()
        print("\n[ERROR] Name at least one structure or pass --all")
        return 1

    db = session_factory()
    try:
        # Resolve every slug before writing anything
        structures = [(slug, get_structure(slug)) for slug in slugs]
        seeder = HierarchySeeder(CategoryStore(db), match_mode=args.match)
        failed_slugs = []

        for slug, structure in structures:
            print_banner(f"Seeding {slug} ({', '.join(root.name for root in structure)})")
            declared = summarize_structure(structure)
            print(
                f"Declared: {declared['categories']} categories, "
                f"{declared['subcategories']} subcategories, {declared['chapters']} chapters\n"
            )
            summary = seeder.seed(structure)
            print_summary(summary)
            if summary.structural_failures:
                failed_slugs.append(slug)

        if failed_slugs:
            print(f"\n[ERROR] Categories or subcategories could not be created for: {', '.join(failed_slugs)}")
            return 1

        print("\n[SUCCESS] Seeding complete\n")
        return 0
    except CategoryTreeException as e:
        print(f"\n[ERROR] {e}")
        return 1
    finally:
        db.close()
