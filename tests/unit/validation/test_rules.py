"""Tests for built-in rules and the rule registry."""

import pytest

from fieldcheck.errors import RuleRegistrationError, TypeMismatchError, ValidationError
from fieldcheck.rules import (
    AlwaysTrueRule,
    NameRule,
    PositiveNumberRule,
    PredicateRule,
    RequiredRule,
    Rule,
    RuleRegistry,
    SlugRule,
    default_registry,
)


class TestRequiredRule:
    """Test required rule."""

    def test_none_is_violation(self):
        error = RequiredRule().check(None, "field")
        assert isinstance(error, ValidationError)
        assert error.rule == "required"
        assert error.field == "field"

    @pytest.mark.parametrize("value", [0, "", False, [], "x"])
    def test_falsy_values_are_present(self, value):
        assert RequiredRule().check(value, "field") is None


class TestPositiveNumberRule:
    """Test positiveNumberField rule."""

    @pytest.mark.parametrize("value", [0, 1, 5, 10**12])
    def test_non_negative_passes(self, value):
        assert PositiveNumberRule().check(value, "quantity") is None

    @pytest.mark.parametrize("value", [-1, -100])
    def test_negative_fails(self, value):
        error = PositiveNumberRule().check(value, "quantity")
        assert error is not None
        assert "greater than or equal to zero" in error.message

    def test_string_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            PositiveNumberRule().check("5", "quantity")

        assert exc_info.value.expected is int
        assert exc_info.value.actual is str
        assert exc_info.value.field == "quantity"

    def test_bool_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError):
            PositiveNumberRule().check(True, "quantity")

    @pytest.mark.parametrize("rule", [PositiveNumberRule(), NameRule(), AlwaysTrueRule(), SlugRule()])
    def test_none_is_left_to_required(self, rule):
        assert rule.check(None, "quantity") is None


class TestNameRule:
    """Test nameField rule."""

    @pytest.mark.parametrize("value", ["Test Product", "a b c", "a  b", "trailing "])
    def test_two_or_more_tokens_pass(self, value):
        assert NameRule().check(value, "name") is None

    @pytest.mark.parametrize("value", ["Single", ""])
    def test_single_token_fails(self, value):
        assert NameRule().check(value, "name") is not None

    def test_int_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError):
            NameRule().check(1, "name")


class TestAlwaysTrueRule:
    """Test alwaysTrueField rule."""

    def test_true_passes(self):
        assert AlwaysTrueRule().check(True, "active") is None

    def test_false_fails(self):
        error = AlwaysTrueRule().check(False, "active")
        assert error.message == "always true field must be true"

    def test_truthy_int_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError):
            AlwaysTrueRule().check(1, "active")


class TestSlugRule:
    """Test slugField rule."""

    @pytest.mark.parametrize("value", ["test-slug", "", "abc123", "ünïcode"])
    def test_lowercase_passes(self, value):
        assert SlugRule().check(value, "slug") is None

    @pytest.mark.parametrize("value", ["Test", "tesT", "ÜBER"])
    def test_uppercase_fails(self, value):
        assert SlugRule().check(value, "slug") is not None


class TestSilentFlag:
    """Test that the silence flag is carried on violations."""

    def test_flag_is_copied(self):
        assert SlugRule().check("X", "slug", silent=True).silent is True
        assert SlugRule().check("X", "slug").silent is False


class TestRuleRegistry:
    """Test RuleRegistry class."""

    def test_builtins(self, registry):
        assert registry.names() == [
            "required",
            "positiveNumberField",
            "nameField",
            "alwaysTrueField",
            "slugField",
        ]
        assert len(registry) == 5

    def test_default_registry_has_builtins(self):
        for name in ["required", "positiveNumberField", "nameField", "alwaysTrueField", "slugField"]:
            assert name in default_registry

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("bogusRule") is None

    def test_register_predicate(self, registry):
        rule = registry.register_rule("evenNumber", lambda v: v % 2 == 0, int, "must be even")

        assert isinstance(rule, PredicateRule)
        assert registry.get("evenNumber") is rule
        assert rule.check(4, "n") is None
        assert rule.check(3, "n").message == "must be even"
        with pytest.raises(TypeMismatchError):
            rule.check("4", "n")

    def test_register_predicate_default_message(self, registry):
        rule = registry.register_rule("nonEmpty", bool)
        assert rule.check("", "f").message == "nonEmpty check failed"

    def test_register_rule_instance(self, registry):
        class UpperRule(Rule):
            value_type = str
            message = "must be upper case"

            @property
            def name(self):
                return "upperField"

            def is_valid(self, value):
                return value.isupper()

        registry.register_rule("upperField", UpperRule())
        assert registry.get("upperField").check("abc", "f") is not None

    def test_register_instance_name_mismatch(self, registry):
        with pytest.raises(RuleRegistrationError):
            registry.register_rule("other", SlugRule())

    def test_duplicate_rejected(self, registry):
        with pytest.raises(RuleRegistrationError, match="already registered"):
            registry.register_rule("slugField", lambda v: True)

    def test_duplicate_replaced(self, registry):
        registry.register_rule("slugField", lambda v: True, replace=True)
        assert registry.get("slugField").check("UPPER", "f") is None

    @pytest.mark.parametrize("name", ["", " padded", "a,b"])
    def test_invalid_names_rejected(self, registry, name):
        with pytest.raises(RuleRegistrationError):
            registry.register_rule(name, lambda v: True)

    def test_non_callable_rejected(self, registry):
        with pytest.raises(RuleRegistrationError):
            registry.register_rule("broken", "not callable")

    def test_registries_are_independent(self, registry):
        registry.register_rule("localOnly", lambda v: True)
        assert "localOnly" not in default_registry
