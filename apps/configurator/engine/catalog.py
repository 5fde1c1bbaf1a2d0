import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from .availability import AvailabilityIndex
from .custom_options import check_definitions
from .exceptions import InvalidCatalogConfiguration
from .types import (
    ZERO,
    ConcreteVariant,
    CustomOptionDefinition,
    VariationGroup,
    to_amount,
)


logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Read-only bundle of one product's configuration data.

    Checked once at construction; the availability index is built here and
    shared by every session opened on the catalog. Nothing in the engine
    mutates it, so many sessions may read one catalog.
    """

    def __init__(
        self,
        product_id: str,
        base_price=ZERO,
        groups: Iterable[VariationGroup] = (),
        variants: Iterable[ConcreteVariant] = (),
        custom_options: Iterable[CustomOptionDefinition] = (),
    ):
        self.product_id = product_id
        self.base_price: Decimal = to_amount(base_price)
        self.groups: Tuple[VariationGroup, ...] = tuple(groups)
        self.variants: Tuple[ConcreteVariant, ...] = tuple(variants)
        self.custom_options: Tuple[CustomOptionDefinition, ...] = tuple(custom_options)

        problems = self._collect_problems()
        if problems:
            logger.warning(
                "Invalid catalog for product %s: %s", product_id, problems
            )
            raise InvalidCatalogConfiguration(problems)

        self._groups_by_name: Dict[str, VariationGroup] = {
            group.name: group for group in self.groups
        }
        self._options_by_id: Dict[str, CustomOptionDefinition] = {
            option.id: option for option in self.custom_options
        }
        self.availability = AvailabilityIndex(self.variants)

    def __repr__(self):
        return (
            f"<ProductCatalog {self.product_id}: {len(self.groups)} groups, "
            f"{len(self.variants)} variants, {len(self.custom_options)} custom options>"
        )

    @property
    def required_group_names(self) -> List[str]:
        return [group.name for group in self.groups if group.required]

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    def get_group(self, name: str) -> Optional[VariationGroup]:
        return self._groups_by_name.get(name)

    def get_custom_option(self, option_id: str) -> Optional[CustomOptionDefinition]:
        return self._options_by_id.get(option_id)

    def get_variant(self, variant_id: str) -> Optional[ConcreteVariant]:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def _collect_problems(self) -> List[str]:
        problems = []

        if self.base_price < ZERO:
            problems.append('Base price is negative')

        group_values = {}
        for group in self.groups:
            if group.name in group_values:
                problems.append(f'Duplicate variation group: {group.name}')
                continue
            values = [option.value for option in group.values]
            if len(values) != len(set(values)):
                problems.append(f'Duplicate option value in group {group.name}')
            group_values[group.name] = set(values)

        required = [group.name for group in self.groups if group.required]
        seen_combinations = {}

        for variant in self.variants:
            if variant.stock_count < 0:
                problems.append(f'Variant {variant.id} has negative stock')

            for group_name, value in variant.attributes.items():
                if group_name not in group_values:
                    problems.append(
                        f'Variant {variant.id} references unknown group {group_name}'
                    )
                elif value not in group_values[group_name]:
                    problems.append(
                        f'Variant {variant.id} references unknown value '
                        f'{value} of group {group_name}'
                    )

            for group_name in required:
                if not variant.attributes.get(group_name):
                    problems.append(
                        f'Variant {variant.id} has no value for required group {group_name}'
                    )

            key = variant.combination_key
            if key in seen_combinations:
                problems.append(
                    f'Variants {seen_combinations[key]} and {variant.id} '
                    f'share the same attribute combination'
                )
            else:
                seen_combinations[key] = variant.id

        problems.extend(check_definitions(self.custom_options))
        return problems
