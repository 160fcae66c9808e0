"""Concurrent execution of a rule set against one manifest."""

import asyncio
import logging
from typing import Iterable

from manifestcheck.models.manifest import ManifestInfo
from manifestcheck.models.results import ValidationReport, ValidationResult

from .errors import RuleExecutionError
from .rule import RuleFunction, as_result_list, call_rule, rule_name

logger = logging.getLogger(__name__)


async def run_validation_rules(
    manifest_info: ManifestInfo,
    rules: Iterable[RuleFunction],
    report: ValidationReport | None = None,
    timeout: float | None = None,
) -> list[ValidationResult]:
    """Run every rule once against the manifest content.

    Each rule runs as its own task and the call returns only after all of
    them settled. A rule that raises, exceeds ``timeout`` or returns something
    other than results is logged and recorded as a failure in ``report``;
    the remaining rules are unaffected.

    Args:
        manifest_info: Manifest to validate
        rules: Rules to execute
        report: Accumulator shared with other executor calls
        timeout: Optional per-rule limit in seconds

    Returns:
        Results produced by this call, in rule completion order
    """
    if report is None:
        report = ValidationReport()

    rules = list(rules)
    produced: list[ValidationResult] = []

    async def execute(rule: RuleFunction) -> None:
        name = rule_name(rule)
        try:
            pending = call_rule(rule, manifest_info.content)
            if timeout is not None:
                outcome = await asyncio.wait_for(pending, timeout=timeout)
            else:
                outcome = await pending
            results = as_result_list(outcome)
        except Exception as e:
            raise RuleExecutionError(name, e) from e

        produced.extend(results)
        report.extend(results)

    logger.debug(f"Running {len(rules)} validation rules")
    outcomes = await asyncio.gather(*(execute(rule) for rule in rules), return_exceptions=True)

    for outcome in outcomes:
        if isinstance(outcome, RuleExecutionError):
            logger.warning(f"{outcome}")
            report.record_failure(outcome.rule, outcome.cause)

    return produced
