"""
Selection session: the orchestrator a quick-view dialog talks to.

Every mutation swaps in a new SelectionState and runs recompute(), a pure
function of (catalog, state, quantity). There is no hidden dependency
tracking: what you read from the session is exactly recompute()'s output.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from .catalog import ProductCatalog
from .custom_options import (
    ValidationResult,
    custom_options_price,
    validate_custom_options,
)
from .exceptions import IssueCode, ValidationError, ValidationIssue
from .matching import (
    is_complete_selection,
    match_variant,
    matching_variants,
    undecided_groups,
)
from .types import ZERO, ConcreteVariant, SelectionState, to_amount


logger = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 5
DEFAULT_HISTORY_LIMIT = 50

VariantObserver = Callable[[Optional[ConcreteVariant], Optional[ConcreteVariant]], None]


class ConfigurationStatus(str, Enum):
    INCOMPLETE = 'incomplete'
    COMPLETE = 'complete'


class StockStatus(str, Enum):
    IN_STOCK = 'in_stock'
    LOW_STOCK = 'low_stock'
    OUT_OF_STOCK = 'out_of_stock'


def stock_status(
    variant: Optional[ConcreteVariant],
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> Optional[StockStatus]:
    if variant is None:
        return None
    if variant.stock_count <= 0:
        return StockStatus.OUT_OF_STOCK
    if variant.stock_count <= low_stock_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


@dataclass(frozen=True)
class DerivedView:
    """Everything the display layer and the cart need, computed in one pass."""
    unit_price: Decimal
    quantity: int
    total_price: Decimal
    matched_variant: Optional[ConcreteVariant]
    stock_status: Optional[StockStatus]
    availability_by_option: Dict[str, Dict[str, bool]]
    status: ConfigurationStatus
    errors: Tuple[ValidationIssue, ...] = ()
    warnings: Tuple[ValidationIssue, ...] = ()

    @property
    def is_complete(self) -> bool:
        return self.status == ConfigurationStatus.COMPLETE

    @property
    def is_valid(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def issues(self) -> Tuple[ValidationIssue, ...]:
        return self.errors + self.warnings


@dataclass(frozen=True)
class CommitPayload:
    """What the cart receives for one configured line."""
    product_id: str
    attribute_selections: Dict[str, str]
    matched_variant_id: Optional[str]
    custom_answers: Dict[str, Any] = field(default_factory=dict)
    unit_price: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            'product_id': self.product_id,
            'attribute_selections': dict(self.attribute_selections),
            'matched_variant_id': self.matched_variant_id,
            'custom_answers': dict(self.custom_answers),
            'unit_price': str(self.unit_price),
        }


def attribute_issues(
    catalog: ProductCatalog,
    selections: Dict[str, str],
) -> List[ValidationIssue]:
    issues = []

    for group_name, value in selections.items():
        group = catalog.get_group(group_name)
        if group is None or group.get_option(value) is None:
            issues.append(ValidationIssue(
                IssueCode.INVALID_ATTRIBUTE_VALUE,
                group_name,
                f'{value} is not a valid {group_name}',
            ))

    for group in catalog.groups:
        if group.required and not selections.get(group.name):
            issues.append(ValidationIssue(
                IssueCode.MISSING_REQUIRED_ATTRIBUTE,
                group.name,
                f'{group.name} is required',
            ))

    return issues


def _variant_warnings(
    catalog: ProductCatalog,
    selections: Dict[str, str],
    matched: Optional[ConcreteVariant],
) -> List[ValidationIssue]:
    if matched is not None:
        if matched.is_in_stock:
            return []
        return [ValidationIssue(
            IssueCode.NO_MATCHING_VARIANT,
            'variant',
            f'{matched.name or matched.sku or matched.id} is out of stock',
        )]

    candidates = matching_variants(catalog.variants, selections)
    if len(candidates) > 1:
        open_groups = undecided_groups(candidates, selections)
        return [ValidationIssue(
            IssueCode.AMBIGUOUS_VARIANT,
            open_groups[0] if open_groups else 'variant',
            f'Choose {" and ".join(open_groups) or "more options"} to pick a variant',
        )]

    return [ValidationIssue(
        IssueCode.NO_MATCHING_VARIANT,
        'variant',
        'This combination is not available',
    )]


def _flagged_option_warnings(
    catalog: ProductCatalog,
    selections: Dict[str, str],
) -> List[ValidationIssue]:
    """Selected options the catalog author marked out of stock."""
    warnings = []
    for group in catalog.groups:
        option = group.get_option(selections.get(group.name))
        if option is not None and option.explicitly_out_of_stock:
            warnings.append(ValidationIssue(
                IssueCode.NO_MATCHING_VARIANT,
                group.name,
                f'{option.get_display_value()} is out of stock',
            ))
    return warnings


def recompute(
    catalog: ProductCatalog,
    state: SelectionState,
    quantity: int = 1,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> DerivedView:
    """
    Derive the session view from catalog and state.

    Order: (1) variant match, (2) per-option availability, (3) price.
    Pure and synchronous; safe to call on every keystroke.
    """
    if quantity < 1:
        raise ValueError(f'Quantity must be at least 1, got {quantity}')

    selections = state.attribute_selections
    required = catalog.required_group_names

    matched = None
    if catalog.has_variants:
        matched = match_variant(catalog.variants, selections, required)

    availability = catalog.availability.availability_by_option(
        catalog.groups, selections
    )

    override = ZERO
    if matched is not None and matched.price_override is not None:
        override = to_amount(matched.price_override)
    unit_price = (
        catalog.base_price
        + override
        + custom_options_price(catalog.custom_options, state.custom_answers)
    )

    errors = attribute_issues(catalog, selections)
    errors.extend(
        validate_custom_options(catalog.custom_options, state.custom_answers).errors
    )

    attributes_complete = is_complete_selection(selections, required)
    warnings = []
    selection_known = not any(
        e.code == IssueCode.INVALID_ATTRIBUTE_VALUE for e in errors
    )
    if catalog.has_variants and attributes_complete and selection_known:
        warnings.extend(_variant_warnings(catalog, selections, matched))
    if selection_known:
        warnings.extend(_flagged_option_warnings(catalog, selections))

    options_complete = not any(
        e.code == IssueCode.MISSING_REQUIRED_CUSTOM_OPTION for e in errors
    )
    if attributes_complete and options_complete:
        status = ConfigurationStatus.COMPLETE
    else:
        status = ConfigurationStatus.INCOMPLETE

    return DerivedView(
        unit_price=unit_price,
        quantity=quantity,
        total_price=unit_price * quantity,
        matched_variant=matched,
        stock_status=stock_status(matched, low_stock_threshold),
        availability_by_option=availability,
        status=status,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


class SelectionSession:
    """
    One shopper's configuration of one product.

    Not shared between interactions and not thread-safe; the catalog it
    reads is. Mutators never raise: problems accumulate in the view and
    surface through validate() and commit().

    Usage:
        session = SelectionSession(catalog)
        session.set_attribute('Size', 'M')
        session.set_custom_answer('gift-wrap', True)
        if session.is_valid:
            cart.add(session.commit(), quantity=2)
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        state: Optional[SelectionState] = None,
        on_variant_change: Optional[VariantObserver] = None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self.catalog = catalog
        self.low_stock_threshold = low_stock_threshold
        self._on_variant_change = on_variant_change
        self._state = state or SelectionState()
        # Oldest snapshots drop off once the limit is reached
        self._history: Deque[SelectionState] = deque(maxlen=history_limit)
        self._view = recompute(catalog, self._state, 1, low_stock_threshold)

    @classmethod
    def for_product(
        cls,
        product_id: str,
        base_price=ZERO,
        groups=(),
        variants=(),
        custom_options=(),
        **kwargs,
    ) -> 'SelectionSession':
        """Build the catalog and the session together; bad data raises here."""
        catalog = ProductCatalog(product_id, base_price, groups, variants, custom_options)
        return cls(catalog, **kwargs)

    # Read-only view

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def view(self) -> DerivedView:
        return self._view

    @property
    def unit_price(self) -> Decimal:
        return self._view.unit_price

    @property
    def matched_variant(self) -> Optional[ConcreteVariant]:
        return self._view.matched_variant

    @property
    def availability_by_option(self) -> Dict[str, Dict[str, bool]]:
        return self._view.availability_by_option

    @property
    def is_complete(self) -> bool:
        return self._view.is_complete

    @property
    def is_valid(self) -> bool:
        return self._view.is_valid

    @property
    def errors(self) -> Tuple[ValidationIssue, ...]:
        return self._view.errors

    @property
    def warnings(self) -> Tuple[ValidationIssue, ...]:
        return self._view.warnings

    def total_price(self, quantity: int = 1) -> Decimal:
        if quantity < 1:
            raise ValueError(f'Quantity must be at least 1, got {quantity}')
        return self._view.unit_price * quantity

    def view_for(self, quantity: int) -> DerivedView:
        return recompute(self.catalog, self._state, quantity, self.low_stock_threshold)

    # Mutators

    def set_attribute(self, group_name: str, value: Optional[str]) -> DerivedView:
        return self._apply(self._state.with_attribute(group_name, value))

    def clear_attribute(self, group_name: str) -> DerivedView:
        return self._apply(self._state.with_attribute(group_name, None))

    def set_custom_answer(self, option_id: str, answer: Any) -> DerivedView:
        return self._apply(self._state.with_custom_answer(option_id, answer))

    def undo(self) -> DerivedView:
        """Go back to the state before the last effective change."""
        if not self._history:
            return self._view
        previous_state = self._history.pop()
        return self._replace(previous_state)

    def reset(self) -> DerivedView:
        return self._apply(SelectionState())

    # Checkout

    def validate(self) -> ValidationResult:
        return ValidationResult.from_errors(self._view.issues)

    def commit(self) -> CommitPayload:
        """
        Hand the configured line to the cart.

        Raises:
            ValidationError: listing every missing field, invalid answer and
                stock or variant warning when the line can't be bought.
        """
        issues = self._view.issues
        if issues:
            raise ValidationError(issues)

        matched = self._view.matched_variant
        payload = CommitPayload(
            product_id=self.catalog.product_id,
            attribute_selections=dict(self._state.attribute_selections),
            matched_variant_id=matched.id if matched else None,
            custom_answers=dict(self._state.custom_answers),
            unit_price=self._view.unit_price,
        )
        logger.debug("Committed configuration %s", payload)
        return payload

    # Internals

    def _apply(self, new_state: SelectionState) -> DerivedView:
        if new_state == self._state:
            return self._view
        self._history.append(self._state)
        return self._replace(new_state)

    def _replace(self, new_state: SelectionState) -> DerivedView:
        previous = self._view.matched_variant
        self._state = new_state
        self._view = recompute(
            self.catalog, new_state, 1, self.low_stock_threshold
        )
        logger.debug(
            "Recomputed product %s: unit_price=%s matched=%s",
            self.catalog.product_id,
            self._view.unit_price,
            self._view.matched_variant.id if self._view.matched_variant else None,
        )

        current = self._view.matched_variant
        if self._on_variant_change is not None and _identity(previous) != _identity(current):
            self._on_variant_change(previous, current)
        return self._view


def _identity(variant: Optional[ConcreteVariant]) -> Optional[str]:
    return variant.id if variant is not None else None
