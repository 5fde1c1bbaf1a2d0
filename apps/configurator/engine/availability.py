"""
Availability of variation options given a partial selection.
Dependencies between groups are INFERRED from the variant table, not configured.
"""

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple

from .types import ConcreteVariant, VariationGroup, VariationOption


class AvailabilityIndex:
    """
    Buckets of in-stock variants keyed by (group name, option value).

    Built once per variant table. A candidate is available when the
    buckets of every non-empty constraint in the hypothetical selection
    still share at least one variant.
    """

    def __init__(self, variants: Iterable[ConcreteVariant]):
        self._variants: Tuple[ConcreteVariant, ...] = tuple(variants)
        buckets = defaultdict(set)
        in_stock = set()

        for position, variant in enumerate(self._variants):
            if not variant.is_in_stock:
                continue
            in_stock.add(position)
            for group_name, value in variant.attributes.items():
                buckets[(group_name, value)].add(position)

        self._buckets: Dict[Tuple[str, str], FrozenSet[int]] = {
            key: frozenset(positions) for key, positions in buckets.items()
        }
        self._in_stock: FrozenSet[int] = frozenset(in_stock)

    @property
    def variants(self) -> Tuple[ConcreteVariant, ...]:
        return self._variants

    def is_available(
        self,
        current_selections: Mapping[str, str],
        group_name: str,
        candidate_value: str,
        option: Optional[VariationOption] = None,
    ) -> bool:
        """
        Return whether `candidate_value` can still be chosen for `group_name`.

        Example:
            variants = [{Size: S, Color: Red, stock 0}, {Size: S, Color: Blue, stock 5}]
            current_selections = {'Color': 'Red'}
            -> is_available(..., 'Size', 'S') is False (the only S/Red is sold out)

        Unselected groups are wildcards. An option flagged out of stock by
        the catalog author is never available. Products without a variant
        table are available unless flagged.
        """
        if option is not None and option.explicitly_out_of_stock:
            return False

        if not self._variants:
            return True

        hypothetical = dict(current_selections)
        hypothetical[group_name] = candidate_value

        constraints = []
        for key, value in hypothetical.items():
            if not value:
                continue  # Wildcard
            bucket = self._buckets.get((key, value))
            if not bucket:
                return False
            constraints.append(bucket)

        if not constraints:
            return bool(self._in_stock)

        # Smallest bucket first keeps the intersection cheap
        constraints.sort(key=len)
        candidates = constraints[0]
        for bucket in constraints[1:]:
            candidates = candidates & bucket
            if not candidates:
                return False
        return True

    def availability_by_option(
        self,
        groups: Sequence[VariationGroup],
        current_selections: Mapping[str, str],
    ) -> Dict[str, Dict[str, bool]]:
        """
        Availability of every option of every group, keyed
        {group name: {option value: bool}}.

        The candidate replaces the group's current value, so a shopper can
        always switch to another value of an already selected group.
        """
        return {
            group.name: {
                option.value: self.is_available(
                    current_selections, group.name, option.value, option
                )
                for option in group.values
            }
            for group in groups
        }


def is_available(
    variants: Sequence[ConcreteVariant],
    current_selections: Mapping[str, str],
    group_name: str,
    candidate_value: str,
    option: Optional[VariationOption] = None,
) -> bool:
    """One-off availability check. Sessions reuse an AvailabilityIndex instead."""
    return AvailabilityIndex(variants).is_available(
        current_selections, group_name, candidate_value, option
    )
