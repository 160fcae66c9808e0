"""Result records emitted by rules and the report that accumulates them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationLevel(str, Enum):
    """Severity of a single validation finding."""
    ERROR = "error"
    WARNING = "warning"


class ReportStatus(str, Enum):
    """Overall status of a validation run."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class ValidationResult(BaseModel):
    """One finding emitted by a rule. Immutable once created."""
    description: str
    platform: str
    level: ValidationLevel
    member: str
    code: str
    data: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        detail = f" {self.data}" if self.data else ""
        return f"[{self.level.value.upper()}] {self.platform}/{self.member} ({self.code}): {self.description}{detail}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "description": self.description,
            "platform": self.platform,
            "level": self.level.value,
            "member": self.member,
            "code": self.code,
            "data": list(self.data),
        }


@dataclass
class RuleFailure:
    """A rule or platform pipeline that failed instead of producing results."""
    rule: str
    error_type: str
    message: str
    platform: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule,
            "error_type": self.error_type,
            "message": self.message,
            "platform": self.platform,
        }


@dataclass
class ValidationReport:
    """Accumulates results and failures across executor invocations.

    Results are kept in the order their rules completed, which is not
    necessarily the order the rules were submitted in.
    """
    results: list[ValidationResult] = field(default_factory=list)
    failures: list[RuleFailure] = field(default_factory=list)
    fail_on_warnings: bool = False

    def extend(self, results: list[ValidationResult]) -> None:
        """Append results produced by one rule."""
        self.results.extend(results)

    def record_failure(self, rule: str, error: BaseException, platform: str | None = None) -> RuleFailure:
        """Record a rule or pipeline that raised instead of reporting."""
        failure = RuleFailure(
            rule=rule,
            error_type=type(error).__name__,
            message=str(error),
            platform=platform,
        )
        self.failures.append(failure)
        return failure

    @property
    def errors(self) -> list[ValidationResult]:
        return [r for r in self.results if r.level == ValidationLevel.ERROR]

    @property
    def warnings(self) -> list[ValidationResult]:
        return [r for r in self.results if r.level == ValidationLevel.WARNING]

    @property
    def status(self) -> ReportStatus:
        """Overall status: fail > warn > pass."""
        if self.errors:
            return ReportStatus.FAIL
        if self.warnings or self.failures:
            return ReportStatus.WARN
        return ReportStatus.PASS

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass/warn, 1 = fail (or warn when fail_on_warnings)."""
        if self.status == ReportStatus.FAIL:
            return 1
        if self.fail_on_warnings and self.status == ReportStatus.WARN:
            return 1
        return 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": {
                "errors": len(self.errors),
                "warnings": len(self.warnings),
                "failures": len(self.failures),
            },
            "results": [result.to_dict() for result in self.results],
            "failures": [failure.to_dict() for failure in self.failures],
        }
