"""Declarative seed structures, one per knowledge domain"""

from typing import Dict, List

from category_tree.exceptions import UnknownSeedStructureException
from category_tree.schemas.seed import RootSpec
from category_tree.seeds import (
    general_knowledge,
    indian_geography,
    indian_history,
    polity_and_economy,
    remaining,
    world_geography,
)

SEED_STRUCTURES: Dict[str, List[dict]] = {
    "indian-geography": indian_geography.STRUCTURE,
    "indian-history": indian_history.STRUCTURE,
    "polity-and-economy": polity_and_economy.STRUCTURE,
    "world-geography": world_geography.STRUCTURE,
    "general-knowledge": general_knowledge.STRUCTURE,
    "remaining": remaining.STRUCTURE,
}


def available_structures() -> List[str]:
    """Registered slugs"""
    return list(SEED_STRUCTURES)


def get_structure(slug: str) -> List[RootSpec]:
    """
    Get a validated seed structure

    Raises:
        UnknownSeedStructureException: Slug not registered
    """
    try:
        entries = SEED_STRUCTURES[slug]
    except KeyError:
        raise UnknownSeedStructureException(
            f"Unknown seed structure '{slug}'. Available: {', '.join(SEED_STRUCTURES)}"
        ) from None
    return [RootSpec.model_validate(entry) for entry in entries]
