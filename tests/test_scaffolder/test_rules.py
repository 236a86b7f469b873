"""Unit tests for the validation rule compiler (formforge.scaffolder.rules).

Tests cover:
- Token order is preserved in the compiled chain
- Default and custom messages
- Email-typed fields always gain an email check
- Number fields compile to a single integer constraint
- Unknown rules and malformed min/max values are ignored and linted
"""

from __future__ import annotations

import pytest

from formforge.models import FieldSpec, FieldType
from formforge.scaffolder.rules import ConstraintKind, compile_rules, lint_rules

pytestmark = pytest.mark.unit


def _field(validation: str = "", type: FieldType = FieldType.TEXT, error_message: str = "") -> FieldSpec:
    return FieldSpec(
        name="username",
        label="Username",
        type=type,
        validation=validation,
        error_message=error_message,
    )


# ---------------------------------------------------------------------------
# compile_rules
# ---------------------------------------------------------------------------


class TestCompileRules:
    def test_empty_rules(self):
        assert compile_rules(_field("")) == []

    def test_order_follows_rule_string(self):
        compiled = compile_rules(_field("max:20,required,min:3"))
        assert [c.kind for c in compiled] == [
            ConstraintKind.MAX,
            ConstraintKind.REQUIRED,
            ConstraintKind.MIN,
        ]
        assert [c.value for c in compiled] == [20, None, 3]

    def test_default_messages(self):
        compiled = compile_rules(_field("required,min:3,max:20"))
        assert [c.message for c in compiled] == [
            "This field is required",
            "Minimum 3 characters required",
            "Maximum 20 characters allowed",
        ]

    def test_custom_message_overrides_every_default(self):
        compiled = compile_rules(_field("required,min:3", error_message="Pick a name"))
        assert {c.message for c in compiled} == {"Pick a name"}

    def test_whitespace_around_tokens(self):
        compiled = compile_rules(_field(" required , min : 3 ,"))
        assert [c.kind for c in compiled] == [ConstraintKind.REQUIRED, ConstraintKind.MIN]
        assert compiled[1].value == 3

    def test_email_type_appends_email_check(self):
        compiled = compile_rules(_field("required", type=FieldType.EMAIL))
        assert [c.kind for c in compiled] == [ConstraintKind.REQUIRED, ConstraintKind.EMAIL]
        assert compiled[-1].message == "Invalid email address"

    def test_email_type_without_rules(self):
        compiled = compile_rules(_field("", type=FieldType.EMAIL))
        assert [c.kind for c in compiled] == [ConstraintKind.EMAIL]

    def test_number_type_is_integer_only(self):
        compiled = compile_rules(_field("required,min:3", type=FieldType.NUMBER))
        assert len(compiled) == 1
        assert compiled[0].kind is ConstraintKind.INTEGER
        assert compiled[0].message == "Must be a valid integer"

    def test_number_type_custom_message(self):
        compiled = compile_rules(_field("", type=FieldType.NUMBER, error_message="Whole numbers"))
        assert compiled[0].message == "Whole numbers"

    def test_unknown_rule_ignored(self):
        compiled = compile_rules(_field("required,uppercase"))
        assert [c.kind for c in compiled] == [ConstraintKind.REQUIRED]

    @pytest.mark.parametrize("rule", ["min", "min:", "min:abc", "max:1.5"])
    def test_malformed_bound_ignored(self, rule):
        assert compile_rules(_field(rule)) == []

    def test_negative_bound_is_an_integer(self):
        compiled = compile_rules(_field("min:-1"))
        assert compiled[0].value == -1


# ---------------------------------------------------------------------------
# lint_rules
# ---------------------------------------------------------------------------


class TestLintRules:
    def test_clean_rules(self):
        assert lint_rules(_field("required,min:3,max:20,email")) == []

    def test_unknown_rule(self):
        warnings = lint_rules(_field("required,uppercase"))
        assert len(warnings) == 1
        assert "unknown validation rule 'uppercase'" in warnings[0]
        assert warnings[0].startswith("username:")

    def test_malformed_bound(self):
        warnings = lint_rules(_field("min:abc"))
        assert len(warnings) == 1
        assert "needs an integer value" in warnings[0]
        assert "'abc'" in warnings[0]

    def test_missing_bound_value(self):
        warnings = lint_rules(_field("max"))
        assert "(got None)" in warnings[0]

    def test_number_field_with_rules(self):
        warnings = lint_rules(_field("required", type=FieldType.NUMBER))
        assert any("only validate as integers" in w for w in warnings)

    def test_number_field_without_rules(self):
        assert lint_rules(_field("", type=FieldType.NUMBER)) == []
