"""Rule dispatch: resolves rule tags to rules and runs them on field values."""

import logging
from typing import Any

from .errors import UnknownRuleError, ValidationError
from .report import ValidationReport, Violation
from .rules import RuleRegistry, default_registry
from .schema import RecordSchema

logger = logging.getLogger(__name__)


def split_tag(tag: str) -> list[str]:
    """Split a raw rule tag into rule names, dropping empty entries."""
    return [name.strip() for name in tag.split(",") if name.strip()]


class Dispatcher:
    """Runs every rule declared on a record's fields."""

    def __init__(self, registry: RuleRegistry | None = None):
        self.registry = registry if registry is not None else default_registry

    def dispatch(self, record: Any, schema: RecordSchema, silent: bool,
                 report: ValidationReport,
                 use_declared_names: bool = True) -> ValidationReport:
        """Check each field against its rules, in field declaration order.

        Values are read through each field's own accessor; the field key
        (declared name or alias) only labels violations.

        Raises:
            UnknownRuleError: a tag names a rule missing from the registry
            TypeMismatchError: a rule was declared on a field of the wrong type
            ValidationError: first violation when ``silent`` is False
        """
        for spec in schema.fields:
            field_name = spec.key(use_declared_names)
            value = spec.accessor(record)
            report.increment_counter("fields_checked")

            for rule_name in split_tag(spec.rules):
                rule = self.registry.get(rule_name)
                if rule is None:
                    raise UnknownRuleError(rule_name, field_name)

                logger.debug(f"Executing rule {rule_name} on {field_name}")
                report.increment_counter("rules_checked")
                error = rule.check(value, field_name, silent)
                if error is not None:
                    self._report(error, report)

        return report

    def _report(self, error: ValidationError, report: ValidationReport) -> None:
        if not error.silent:
            raise error
        logger.warning(str(error))
        report.add_violation(Violation.from_error(error))
