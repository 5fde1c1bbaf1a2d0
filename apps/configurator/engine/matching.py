import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from .types import ConcreteVariant


logger = logging.getLogger(__name__)


def is_complete_selection(
    selections: Mapping[str, str],
    required_groups: Iterable[str],
) -> bool:
    return all(selections.get(name) for name in required_groups)


def matching_variants(
    variants: Sequence[ConcreteVariant],
    selections: Mapping[str, str],
) -> List[ConcreteVariant]:
    """Every variant whose attributes equal each non-empty selected value."""
    chosen = {k: v for k, v in selections.items() if v}
    return [
        variant for variant in variants
        if all(variant.attributes.get(k) == v for k, v in chosen.items())
    ]


def match_variant(
    variants: Sequence[ConcreteVariant],
    selections: Mapping[str, str],
    required_groups: Iterable[str] = (),
) -> Optional[ConcreteVariant]:
    """
    Find the variant whose attributes equal every selected value.

    Args:
        variants: The product's variant table
        selections: Dict of {group name: option value}
        required_groups: Names of groups that must be selected first

    Returns:
        The single matching ConcreteVariant, or None when the selection is
        partial, empty, matches nothing or matches more than one variant.
    """
    chosen = {k: v for k, v in selections.items() if v}

    if not chosen or not is_complete_selection(chosen, required_groups):
        return None

    matches = matching_variants(variants, chosen)

    if len(matches) > 1:
        # Only possible while optional groups are still open
        logger.debug(
            "Selection %s is ambiguous (%d variants)", chosen, len(matches)
        )
        return None

    return matches[0] if matches else None


def undecided_groups(
    candidates: Sequence[ConcreteVariant],
    selections: Mapping[str, str],
) -> List[str]:
    """Unselected groups whose values still differ between the candidates."""
    names = []
    for variant in candidates:
        for name in variant.attributes:
            if name not in names and not selections.get(name):
                names.append(name)
    return [
        name for name in names
        if len({variant.attributes.get(name) for variant in candidates}) > 1
    ]
