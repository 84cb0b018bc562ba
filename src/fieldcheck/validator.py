"""Validator entry point."""

import logging
from typing import Any

from .dispatch import Dispatcher
from .report import ValidationReport
from .rules import RuleRegistry
from .schema import schema_for

logger = logging.getLogger(__name__)


class Validator:
    """Validates one record against the rules declared on its fields.

    In strict mode (the default) the first violation is raised as
    :class:`~fieldcheck.errors.ValidationError`. With ``fail_silently`` every
    violation is logged and collected on the returned report instead.
    Configuration errors are raised in both modes.
    """

    def __init__(self, record: Any, fail_silently: bool = False, *,
                 registry: RuleRegistry | None = None, use_declared_names: bool = True):
        self.record = record
        self.fail_silently = fail_silently
        self.registry = registry
        self.use_declared_names = use_declared_names

    def validate(self) -> ValidationReport:
        schema = schema_for(self.record)

        logger.debug(
            f"Validating {len(schema.fields)} fields of {type(self.record).__name__} "
            f"({'silent' if self.fail_silently else 'strict'} mode)"
        )

        report = Dispatcher(self.registry).dispatch(
            self.record, schema, self.fail_silently, ValidationReport(),
            use_declared_names=self.use_declared_names,
        )

        logger.info(
            f"Validation of {type(self.record).__name__} completed with status: "
            f"{report.status.value} ({len(report.violations)} violations)"
        )
        return report


def validate(record: Any, fail_silently: bool = False, *,
             registry: RuleRegistry | None = None,
             use_declared_names: bool = True) -> ValidationReport:
    """Shorthand for ``Validator(record, ...).validate()``."""
    return Validator(
        record, fail_silently, registry=registry, use_declared_names=use_declared_names
    ).validate()
