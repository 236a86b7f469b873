"""Compiles a field's validation rule string into ordered schema constraints.

The rule grammar is a comma-separated list of ``rule[:value]`` tokens drawn
from ``required``, ``min``, ``max`` and ``email``.  The compiled order is the
order of the chained zod checks, so it decides which message wins when more
than one check fails.

Leniency policy:

- unknown rule names are ignored;
- ``min``/``max`` without an integer value are ignored as if omitted.

``lint_rules`` reports both cases so the CLI can warn about them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import FieldSpec, FieldType


class ConstraintKind(str, Enum):
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    EMAIL = "email"
    INTEGER = "integer"


@dataclass(frozen=True)
class CompiledConstraint:
    """One chained check of the emitted schema."""

    kind: ConstraintKind
    value: Optional[int]
    message: str


_DEFAULT_MESSAGES: dict[ConstraintKind, str] = {
    ConstraintKind.REQUIRED: "This field is required",
    ConstraintKind.MIN: "Minimum {value} characters required",
    ConstraintKind.MAX: "Maximum {value} characters allowed",
    ConstraintKind.EMAIL: "Invalid email address",
    ConstraintKind.INTEGER: "Must be a valid integer",
}

_RULE_TABLE: dict[str, ConstraintKind] = {
    "required": ConstraintKind.REQUIRED,
    "min": ConstraintKind.MIN,
    "max": ConstraintKind.MAX,
    "email": ConstraintKind.EMAIL,
}

_PARAMETERISED = (ConstraintKind.MIN, ConstraintKind.MAX)


def compile_rules(field: FieldSpec) -> list[CompiledConstraint]:
    """Compile *field*'s rule string into an ordered constraint list."""
    if field.type is FieldType.NUMBER:
        # Numeric fields bypass the string chain entirely.
        return [_constraint(field, ConstraintKind.INTEGER, None)]

    compiled: list[CompiledConstraint] = []
    for name, raw_value in _tokens(field.validation):
        kind = _RULE_TABLE.get(name)
        if kind is None:
            continue
        value: Optional[int] = None
        if kind in _PARAMETERISED:
            value = _parse_int(raw_value)
            if value is None:
                continue
        compiled.append(_constraint(field, kind, value))

    if field.type is FieldType.EMAIL:
        compiled.append(_constraint(field, ConstraintKind.EMAIL, None))
    return compiled


def lint_rules(field: FieldSpec) -> list[str]:
    """Describe every token of *field*'s rule string that compilation ignores."""
    warnings: list[str] = []
    for name, raw_value in _tokens(field.validation):
        kind = _RULE_TABLE.get(name)
        if kind is None:
            warnings.append(f"{field.name}: unknown validation rule {name!r} ignored")
        elif kind in _PARAMETERISED and _parse_int(raw_value) is None:
            warnings.append(
                f"{field.name}: rule {name!r} needs an integer value "
                f"(got {raw_value!r}) and was ignored"
            )
    if field.type is FieldType.NUMBER and field.validation.strip():
        warnings.append(
            f"{field.name}: number fields only validate as integers; "
            f"rules {field.validation!r} are not applied"
        )
    return warnings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tokens(rule_string: str) -> list[tuple[str, Optional[str]]]:
    tokens: list[tuple[str, Optional[str]]] = []
    for token in rule_string.split(","):
        if not token.strip():
            continue
        name, sep, value = token.partition(":")
        tokens.append((name.strip(), value.strip() if sep else None))
    return tokens


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _constraint(
    field: FieldSpec, kind: ConstraintKind, value: Optional[int]
) -> CompiledConstraint:
    message = field.error_message or _DEFAULT_MESSAGES[kind].format(value=value)
    return CompiledConstraint(kind=kind, value=value, message=message)
