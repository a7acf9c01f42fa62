"""Test bundled seed structures"""

import pytest

from category_tree.exceptions import UnknownSeedStructureException
from category_tree.seeds import SEED_STRUCTURES, available_structures, get_structure
from category_tree.services.hierarchy_seeder import HierarchySeeder


@pytest.mark.parametrize("slug", sorted(SEED_STRUCTURES))
def test_structure_is_valid(slug):
    """Structures validate and sibling names are unique"""
    roots = get_structure(slug)
    assert roots

    for root in roots:
        sub_names = [sub.name.lower() for sub in root.subcategories]
        assert len(sub_names) == len(set(sub_names))
        for sub in root.subcategories:
            chapter_names = [chapter.name.lower() for chapter in sub.chapters]
            assert len(chapter_names) == len(set(chapter_names))


def test_unknown_structure():
    with pytest.raises(UnknownSeedStructureException):
        get_structure("astrology")


def test_registry_slugs():
    assert available_structures() == [
        "indian-geography",
        "indian-history",
        "polity-and-economy",
        "world-geography",
        "general-knowledge",
        "remaining",
    ]


def test_remaining_has_root_level_chapters():
    roots = {root.name: root for root in get_structure("remaining")}

    assert roots["Current Affairs"].subcategories == []
    assert len(roots["Current Affairs"].chapters) == 6
    assert roots["Current Affairs"].default_subcategory_name == "Current Affairs - General"


def test_all_structures_seed_idempotently(store):
    """Every bundled structure can be applied twice without new rows"""
    seeder = HierarchySeeder(store)

    for slug in available_structures():
        first = seeder.seed(get_structure(slug))
        assert not first.has_failures
        assert first.total_created > 0

    for slug in available_structures():
        second = seeder.seed(get_structure(slug))
        assert second.total_created == 0
        assert not second.has_failures
