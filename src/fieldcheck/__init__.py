"""fieldcheck - Declarative field validation for structured records.

Fields declare named rules in their metadata; a Validator resolves each name
through a rule registry and checks the field's value, either stopping at the
first violation or collecting all of them.
"""

__version__ = "0.1.0"
__description__ = "Declarative field validation for structured records"

from fieldcheck.errors import (
    ConfigError,
    FieldCheckError,
    NonStructValidationError,
    RuleRegistrationError,
    TypeMismatchError,
    UnknownRuleError,
    ValidationError,
)
from fieldcheck.report import ValidationReport, ValidationStatus, Violation
from fieldcheck.rules import Rule, RuleRegistry, default_registry, register_rule
from fieldcheck.schema import (
    FieldSpec,
    MappingRecord,
    RecordSchema,
    extract_field_rules,
    register_schema,
    schema_for,
    schema_from_mapping,
)
from fieldcheck.validator import Validator, validate

__all__ = [
    "__version__",
    "__description__",
    "Validator",
    "validate",
    "Rule",
    "RuleRegistry",
    "default_registry",
    "register_rule",
    "FieldSpec",
    "RecordSchema",
    "MappingRecord",
    "extract_field_rules",
    "register_schema",
    "schema_for",
    "schema_from_mapping",
    "ValidationReport",
    "ValidationStatus",
    "Violation",
    "FieldCheckError",
    "NonStructValidationError",
    "UnknownRuleError",
    "TypeMismatchError",
    "ValidationError",
    "RuleRegistrationError",
    "ConfigError",
]
