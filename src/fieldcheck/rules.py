"""Validation rules and the registry that maps rule names to them.

Each rule declares the value type it applies to. The registry is the only
place rule names are resolved; ``fieldcheck.dispatch`` looks names up here.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from .errors import RuleRegistrationError, TypeMismatchError, ValidationError

logger = logging.getLogger(__name__)


class Rule(ABC):
    """Base class for validation rules."""

    value_type: type = object
    message: str = "value is invalid"

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name as written in a field's rule tag."""
        pass

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True when ``value`` satisfies the rule.

        Only called with values accepted by :meth:`accepts`.
        """
        pass

    def accepts(self, value: Any) -> bool:
        if self.value_type is object:
            return True
        # bool is an int subclass; an int rule must not pass a bool through
        if isinstance(value, bool) and self.value_type is not bool:
            return False
        return isinstance(value, self.value_type)

    def check(self, value: Any, field: str, silent: bool = False) -> ValidationError | None:
        """Run the rule against a field value.

        Typed rules do not apply to an absent (None) value; absence is
        judged by the ``required`` rule.

        Returns:
            ValidationError describing the violation, or None when valid

        Raises:
            TypeMismatchError: value is not of the rule's type
        """
        if value is None and self.value_type is not object:
            return None
        if not self.accepts(value):
            raise TypeMismatchError(self.name, field, self.value_type, type(value))
        if self.is_valid(value):
            return None
        return ValidationError(self.message, field, self.name, silent)


class RequiredRule(Rule):
    """Value must not be absent."""

    message = "required field cannot be empty"

    @property
    def name(self) -> str:
        return "required"

    def is_valid(self, value: Any) -> bool:
        return value is not None


class PositiveNumberRule(Rule):
    """Integer must not be negative."""

    value_type = int
    message = "positive number field must be greater than or equal to zero"

    @property
    def name(self) -> str:
        return "positiveNumberField"

    def is_valid(self, value: int) -> bool:
        return value >= 0


class NameRule(Rule):
    """String must hold at least two words separated by single spaces."""

    value_type = str
    message = "name field must be minimum 2 words"

    @property
    def name(self) -> str:
        return "nameField"

    def is_valid(self, value: str) -> bool:
        return len(value.split(" ")) >= 2


class AlwaysTrueRule(Rule):
    """Boolean must be True."""

    value_type = bool
    message = "always true field must be true"

    @property
    def name(self) -> str:
        return "alwaysTrueField"

    def is_valid(self, value: bool) -> bool:
        return value is True


class SlugRule(Rule):
    """String must not contain uppercase characters."""

    value_type = str
    message = "slug field must contain lowercase letters only"

    @property
    def name(self) -> str:
        return "slugField"

    def is_valid(self, value: str) -> bool:
        return not any(c.isupper() for c in value)


class PredicateRule(Rule):
    """Rule built from a plain ``value -> bool`` callable."""

    def __init__(self, name: str, predicate: Callable[[Any], bool],
                 value_type: type = object, message: str | None = None):
        self._name = name
        self.predicate = predicate
        self.value_type = value_type
        self.message = message or f"{name} check failed"

    @property
    def name(self) -> str:
        return self._name

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))


BUILTIN_RULES: tuple[type[Rule], ...] = (
    RequiredRule,
    PositiveNumberRule,
    NameRule,
    AlwaysTrueRule,
    SlugRule,
)


class RuleRegistry:
    """Mapping from rule name to :class:`Rule`."""

    def __init__(self):
        self._rules: dict[str, Rule] = {}

    @classmethod
    def with_builtins(cls) -> "RuleRegistry":
        registry = cls()
        for rule_cls in BUILTIN_RULES:
            registry.add(rule_cls())
        return registry

    def add(self, rule: Rule, replace: bool = False) -> Rule:
        """Add a rule instance under its own name.

        Raises:
            RuleRegistrationError: invalid name, or name taken and not ``replace``
        """
        name = rule.name
        if not name or name != name.strip():
            raise RuleRegistrationError(f"Invalid rule name: {name!r}")
        if "," in name:
            raise RuleRegistrationError(f"Rule name must not contain ',': {name!r}")
        if name in self._rules and not replace:
            raise RuleRegistrationError(f"Rule already registered: {name}")

        self._rules[name] = rule
        logger.debug(f"Registered rule: {name}")
        return rule

    def register_rule(self, name: str, check: Rule | Callable[[Any], bool],
                      value_type: type = object, message: str | None = None,
                      replace: bool = False) -> Rule:
        """Register a rule by name.

        Args:
            name: Rule name used in field tags
            check: A Rule instance, or a predicate returning True for valid values
            value_type: Type the predicate applies to (ignored for Rule instances)
            message: Violation message (ignored for Rule instances)
            replace: Overwrite an existing rule with the same name
        """
        if isinstance(check, Rule):
            if check.name != name:
                raise RuleRegistrationError(
                    f"Rule instance is named '{check.name}', not '{name}'"
                )
            return self.add(check, replace=replace)
        if not callable(check):
            raise RuleRegistrationError(f"Rule '{name}' must be a Rule or a callable")
        return self.add(PredicateRule(name, check, value_type, message), replace=replace)

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        """Registered rule names in registration order."""
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)


default_registry = RuleRegistry.with_builtins()


def register_rule(name: str, check: Rule | Callable[[Any], bool],
                  value_type: type = object, message: str | None = None,
                  replace: bool = False) -> Rule:
    """Register a rule on the process-wide default registry."""
    return default_registry.register_rule(name, check, value_type, message, replace)
