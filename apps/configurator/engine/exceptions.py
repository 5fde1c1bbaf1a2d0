from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


class IssueCode(str, Enum):
    MISSING_REQUIRED_ATTRIBUTE = 'missing_required_attribute'
    MISSING_REQUIRED_CUSTOM_OPTION = 'missing_required_custom_option'
    NO_MATCHING_VARIANT = 'no_matching_variant'
    AMBIGUOUS_VARIANT = 'ambiguous_variant'
    INVALID_ATTRIBUTE_VALUE = 'invalid_attribute_value'
    INVALID_CUSTOM_ANSWER = 'invalid_custom_answer'
    UNKNOWN_CUSTOM_OPTION = 'unknown_custom_option'


@dataclass(frozen=True)
class ValidationIssue:
    """A problem the shopper can fix by changing the selection."""
    code: IssueCode
    field: str
    message: str

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'field': self.field,
            'message': self.message,
        }


class ConfiguratorError(Exception):
    """Base class for configuration engine errors."""


class InvalidCatalogConfiguration(ConfiguratorError):
    """
    The catalog data handed to the engine is unusable.
    Only the catalog author can fix it, never the shopper.
    """

    def __init__(self, problems: Iterable[str]):
        self.problems: List[str] = list(problems)
        super().__init__('; '.join(self.problems) or 'Invalid catalog configuration')


class ValidationError(ConfiguratorError):
    """Raised by commit() when the selection cannot be added to the cart."""

    def __init__(self, errors: Iterable[ValidationIssue]):
        self.errors: Tuple[ValidationIssue, ...] = tuple(errors)
        super().__init__('; '.join(e.message for e in self.errors))

    @property
    def codes(self) -> List[IssueCode]:
        return [e.code for e in self.errors]
