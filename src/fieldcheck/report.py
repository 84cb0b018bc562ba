"""Outcome of a validation run.

A strict validator raises on the first violation, so its report only ever
carries counters. A silent validator records every violation here instead.
"""

from dataclasses import dataclass, field
from enum import Enum

from .errors import ValidationError


class ValidationStatus(str, Enum):
    """Overall status of a validation run."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class Violation:
    """A single rule violation found on a field."""
    field: str
    rule: str
    message: str
    silent: bool = True

    @classmethod
    def from_error(cls, error: ValidationError) -> "Violation":
        return cls(error.field, error.rule, error.message, error.silent)

    def __str__(self) -> str:
        return f"[{self.rule}] {self.field}: {self.message}"


@dataclass
class ValidationReport:
    """Results of one ``Validator.validate()`` call."""
    status: ValidationStatus = ValidationStatus.PASS
    violations: list[Violation] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == ValidationStatus.PASS

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.ok else 1

    def add_violation(self, violation: Violation) -> None:
        self.violations.append(violation)
        self.status = ValidationStatus.FAIL
        self.increment_counter("violations")

    def increment_counter(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def for_field(self, name: str) -> list[Violation]:
        """Violations recorded against one field, in the order they were found."""
        return [v for v in self.violations if v.field == name]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "violations": [
                {
                    "field": v.field,
                    "rule": v.rule,
                    "message": v.message,
                }
                for v in self.violations
            ]
        }
