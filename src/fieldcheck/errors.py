"""Exception hierarchy for fieldcheck.

Configuration errors (non-aggregate records, unknown rules, rule/value type
mismatches) always propagate to the caller. Only ``ValidationError`` honours
the validator's silence flag.
"""


class FieldCheckError(Exception):
    """Base class for every error raised by fieldcheck."""


class NonStructValidationError(FieldCheckError):
    """Raised when the value handed to a validator is not a structured record."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Non struct types can not be validated: {kind}")


class UnknownRuleError(FieldCheckError):
    """Raised when a field declares a rule that is not registered."""

    def __init__(self, rule: str, field: str | None = None):
        self.rule = rule
        self.field = field
        location = f" on field '{field}'" if field else ""
        super().__init__(f"Unknown rule '{rule}'{location}")


class TypeMismatchError(FieldCheckError):
    """Raised when a rule is run against a value of an incompatible type."""

    def __init__(self, rule: str, field: str | None, expected: type, actual: type):
        self.rule = rule
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field}: {rule}: expected {expected.__name__}, got {actual.__name__}"
        )


class ValidationError(FieldCheckError):
    """A field value violates one of its declared rules."""

    def __init__(self, message: str, field: str, rule: str, silent: bool = False):
        self.message = message
        self.field = field
        self.rule = rule
        self.silent = silent
        super().__init__(f"{field}: {rule}: {message}")


class RuleRegistrationError(FieldCheckError):
    """Raised when a rule cannot be added to a registry."""


class ConfigError(FieldCheckError, ValueError):
    """Raised when a configuration file cannot be loaded."""
