"""
Product configuration engine.

Pure, synchronous resolution of what a shopper may select, which stocked
variant the selection identifies and what the line costs. No Django, no I/O.
"""

from .availability import AvailabilityIndex, is_available
from .catalog import ProductCatalog
from .custom_options import (
    ValidationResult,
    custom_options_price,
    is_answered,
    option_price,
    validate_custom_options,
)
from .exceptions import (
    ConfiguratorError,
    InvalidCatalogConfiguration,
    IssueCode,
    ValidationError,
    ValidationIssue,
)
from .matching import match_variant
from .session import (
    CommitPayload,
    ConfigurationStatus,
    DerivedView,
    SelectionSession,
    StockStatus,
    recompute,
)
from .types import (
    ConcreteVariant,
    CustomOptionChoice,
    CustomOptionDefinition,
    DisplayKind,
    OptionKind,
    SelectionState,
    VariationGroup,
    VariationOption,
)

__all__ = [
    'AvailabilityIndex',
    'is_available',
    'ProductCatalog',
    'ValidationResult',
    'custom_options_price',
    'is_answered',
    'option_price',
    'validate_custom_options',
    'ConfiguratorError',
    'InvalidCatalogConfiguration',
    'IssueCode',
    'ValidationError',
    'ValidationIssue',
    'match_variant',
    'CommitPayload',
    'ConfigurationStatus',
    'DerivedView',
    'SelectionSession',
    'StockStatus',
    'recompute',
    'ConcreteVariant',
    'CustomOptionChoice',
    'CustomOptionDefinition',
    'DisplayKind',
    'OptionKind',
    'SelectionState',
    'VariationGroup',
    'VariationOption',
]
