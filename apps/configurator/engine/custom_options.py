"""
Validation and pricing of custom option answers.
All amounts are Decimal, so repeated recomputation never drifts.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .exceptions import IssueCode, ValidationIssue
from .types import ZERO, CustomOptionDefinition, OptionKind, to_amount


HEX_COLOR_RE = re.compile(r'^#[0-9A-Fa-f]{6}$')


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[ValidationIssue, ...] = ()

    @classmethod
    def from_errors(cls, errors: Sequence[ValidationIssue]) -> 'ValidationResult':
        return cls(valid=not errors, errors=tuple(errors))


def is_answered(answer: Any) -> bool:
    """Absent, empty and False answers count as not given. Zero is an answer."""
    return not (answer is None or answer is False or answer == '')


def _as_number(answer: Any) -> Optional[Decimal]:
    if isinstance(answer, bool):
        return None
    try:
        number = to_amount(answer)
    except (InvalidOperation, ValueError, TypeError):
        return None
    return number if number.is_finite() else None


def _answer_problem(definition: CustomOptionDefinition, answer: Any) -> Optional[str]:
    """Describe what is wrong with an answer's shape, or None when it fits."""
    kind = definition.kind

    if kind in (OptionKind.TEXT, OptionKind.TEXTAREA):
        if not isinstance(answer, str):
            return 'must be text'
        if definition.max_length and len(answer) > definition.max_length:
            return f'must be at most {definition.max_length} characters'

    elif kind == OptionKind.NUMBER:
        number = _as_number(answer)
        if number is None:
            return 'must be a number'
        if definition.min_value is not None and number < definition.min_value:
            return f'must be at least {definition.min_value}'
        if definition.max_value is not None and number > definition.max_value:
            return f'must be at most {definition.max_value}'

    elif kind == OptionKind.SELECT:
        if definition.get_choice(answer) is None:
            return 'is not one of the available choices'

    elif kind == OptionKind.CHECKBOX:
        if not isinstance(answer, bool):
            return 'must be true or false'

    elif kind == OptionKind.COLOR:
        if not isinstance(answer, str) or not HEX_COLOR_RE.match(answer):
            return 'must be a hex colour (#RRGGBB)'

    elif kind == OptionKind.DATE:
        try:
            date.fromisoformat(answer)
        except (TypeError, ValueError):
            return 'must be a date (YYYY-MM-DD)'

    return None


def validate_custom_options(
    definitions: Sequence[CustomOptionDefinition],
    answers: Mapping[str, Any],
) -> ValidationResult:
    """
    Check every definition against the answers.

    All failures are collected so the caller can show every missing or
    malformed field at once.
    """
    errors: List[ValidationIssue] = []
    known_ids = set()

    for definition in definitions:
        known_ids.add(definition.id)
        answer = answers.get(definition.id)

        if not is_answered(answer):
            if definition.required:
                errors.append(ValidationIssue(
                    IssueCode.MISSING_REQUIRED_CUSTOM_OPTION,
                    definition.name,
                    f'{definition.name} is required',
                ))
            continue

        problem = _answer_problem(definition, answer)
        if problem:
            errors.append(ValidationIssue(
                IssueCode.INVALID_CUSTOM_ANSWER,
                definition.name,
                f'{definition.name} {problem}',
            ))

    for option_id in answers:
        if option_id not in known_ids:
            errors.append(ValidationIssue(
                IssueCode.UNKNOWN_CUSTOM_OPTION,
                str(option_id),
                f'Unknown custom option: {option_id}',
            ))

    return ValidationResult.from_errors(errors)


def option_price(definition: CustomOptionDefinition, answer: Any) -> Decimal:
    """Surcharge contributed by a single answered option."""
    if not is_answered(answer):
        return ZERO

    total = to_amount(definition.price_modifier)

    if definition.kind == OptionKind.SELECT:
        choice = definition.get_choice(answer)
        if choice is not None and choice.price:
            total += to_amount(choice.price)

    elif definition.kind == OptionKind.CHECKBOX:
        if answer and definition.choices and definition.choices[0].price:
            total += to_amount(definition.choices[0].price)

    return total


def custom_options_price(
    definitions: Sequence[CustomOptionDefinition],
    answers: Mapping[str, Any],
) -> Decimal:
    """
    Sum of all custom option surcharges. Options do not interact, so this
    is the sum of option_price() over the definitions.
    """
    return sum(
        (option_price(d, answers.get(d.id)) for d in definitions),
        ZERO,
    )


def check_definitions(definitions: Sequence[CustomOptionDefinition]) -> List[str]:
    """
    Catalog-level problems with custom option definitions.
    Surcharges are additive, so negative amounts are configuration errors.
    """
    problems = []
    seen_ids = set()

    for definition in definitions:
        if definition.id in seen_ids:
            problems.append(f'Duplicate custom option id: {definition.id}')
        seen_ids.add(definition.id)

        if to_amount(definition.price_modifier) < ZERO:
            problems.append(
                f'Custom option {definition.name} has a negative price modifier'
            )

        for choice in definition.choices:
            if choice.price is not None and to_amount(choice.price) < ZERO:
                problems.append(
                    f'Choice {choice.value} of custom option {definition.name} '
                    f'has a negative price'
                )

        if definition.kind == OptionKind.SELECT and not definition.choices:
            problems.append(f'Custom option {definition.name} has no choices')

    return problems
