"""
Ordered validation of an incoming build request.

Each rule is a pure predicate returning a ``ValidationOutcome`` on failure and
``None`` otherwise. Rules are grouped per field; the groups run in order and
the first failing group stops validation.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from .exceptions import ValidationError

PRESET_DECLARATION = "tailwind.config = {"


@dataclass(frozen=True)
class ValidationOutcome:
    field: str
    message: str


def not_blank(field, message):
    def rule(value):
        if not value:
            return ValidationOutcome(field, message)
        return None
    return rule


def first_line_is_declaration(value):
    # First non-blank line, trimmed
    first_line = next((line.strip() for line in value.split("\n") if line.strip()), "")
    if first_line != PRESET_DECLARATION:
        return ValidationOutcome("preset", "The tailwind config preset is not following the expected format.")
    return None


def recognized_caller(matcher: Callable):
    def rule(value):
        if matcher(value) is None:
            return ValidationOutcome(
                "origin",
                "The origin of request is unknown: the request is not sent by Oxywind plugins.",
            )
        return None
    return rule


def build_rule_chain(matcher):
    return [
        ("preset", [
            not_blank("preset", "The tailwind config preset is required."),
            first_line_is_declaration,
        ]),
        ("content", [not_blank("content", "The content is required.")]),
        ("css", [not_blank("css", "The css is required.")]),
        ("caller_agent", [
            not_blank("origin", "The origin of request is unknown."),
            recognized_caller(matcher),
        ]),
    ]


def run_group(rules, value) -> Optional[ValidationOutcome]:
    for rule in rules:
        outcome = rule(value)
        if outcome is not None:
            return outcome
    return None


def validate_request(request, matcher):
    """Raise ``ValidationError`` for the first field of ``request`` that fails."""
    for attribute, rules in build_rule_chain(matcher):
        outcome = run_group(rules, getattr(request, attribute))
        if outcome is not None:
            raise ValidationError(outcome.message)
