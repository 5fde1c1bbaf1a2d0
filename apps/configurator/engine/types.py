"""
Value types for the product configuration engine.

Model Hierarchy:
- VariationGroup: A named axis of variation (Size, Color) with ordered options
- VariationOption: One selectable value inside a group
- ConcreteVariant: A stocked unit identified by one value per group
- CustomOptionDefinition: Free-form per-order customization with a price effect
- SelectionState: What the shopper picked so far (immutable snapshot)
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple


ZERO = Decimal('0')


def to_amount(value: Any) -> Decimal:
    """Convert catalog amounts to Decimal without going through binary floats."""
    if value is None or value == '':
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class DisplayKind(str, Enum):
    BUTTON = 'button'
    SWATCH = 'swatch'
    DROPDOWN = 'dropdown'
    IMAGE = 'image'
    SIZE_CHART = 'size-chart'


class OptionKind(str, Enum):
    TEXT = 'text'
    TEXTAREA = 'textarea'
    SELECT = 'select'
    CHECKBOX = 'checkbox'
    NUMBER = 'number'
    COLOR = 'color'
    DATE = 'date'


@dataclass(frozen=True)
class VariationOption:
    """
    One value of a variation group.

    `explicitly_out_of_stock` is set by the catalog author and wins over
    whatever the variant table says.
    """
    value: str
    label: str = ''
    hex_color: Optional[str] = None
    image_ref: Optional[str] = None
    explicitly_out_of_stock: bool = False
    price_modifier: Decimal = ZERO

    def get_display_value(self) -> str:
        return self.label or self.value


@dataclass(frozen=True)
class VariationGroup:
    """
    A named axis of product variation.
    The name is the key used in ConcreteVariant.attributes.
    """
    id: str
    name: str
    display_kind: DisplayKind = DisplayKind.BUTTON
    values: Tuple[VariationOption, ...] = ()
    required: bool = True

    def get_option(self, value: str) -> Optional[VariationOption]:
        for option in self.values:
            if option.value == value:
                return option
        return None


@dataclass(frozen=True)
class ConcreteVariant:
    """Stocked unit with its own attribute combination and optional price override."""
    id: str
    attributes: Dict[str, str] = field(default_factory=dict)
    stock_count: int = 0
    sku: Optional[str] = None
    name: str = ''
    price_override: Optional[Decimal] = None

    @property
    def combination_key(self) -> frozenset:
        return frozenset(self.attributes.items())

    @property
    def is_in_stock(self) -> bool:
        return self.stock_count > 0


@dataclass(frozen=True)
class CustomOptionChoice:
    label: str
    value: str
    price: Optional[Decimal] = None


@dataclass(frozen=True)
class CustomOptionDefinition:
    """
    A customization field shown next to the variation selectors.

    For `select`, `choices` lists the allowed answers and their surcharges.
    For `checkbox`, `choices[0].price` is charged when the box is checked.
    """
    id: str
    name: str
    kind: OptionKind = OptionKind.TEXT
    required: bool = False
    price_modifier: Decimal = ZERO
    choices: Tuple[CustomOptionChoice, ...] = ()
    min_value: Optional[Decimal] = None
    max_value: Optional[Decimal] = None
    max_length: Optional[int] = None

    def get_choice(self, value: Any) -> Optional[CustomOptionChoice]:
        for choice in self.choices:
            if choice.value == value:
                return choice
        return None


def _clean(value: Any) -> bool:
    return value is not None and value != ''


@dataclass(frozen=True)
class SelectionState:
    """
    Snapshot of a shopper's choices.
    Never mutated in place: every change produces a new state.
    """
    attribute_selections: Dict[str, str] = field(default_factory=dict)
    custom_answers: Dict[str, Any] = field(default_factory=dict)

    def with_attribute(self, group_name: str, value: Optional[str]) -> 'SelectionState':
        selections = dict(self.attribute_selections)
        if _clean(value):
            selections[group_name] = value
        else:
            selections.pop(group_name, None)
        return SelectionState(selections, dict(self.custom_answers))

    def with_custom_answer(self, option_id: str, answer: Any) -> 'SelectionState':
        answers = dict(self.custom_answers)
        if answer is None:
            answers.pop(option_id, None)
        else:
            answers[option_id] = answer
        return SelectionState(dict(self.attribute_selections), answers)
