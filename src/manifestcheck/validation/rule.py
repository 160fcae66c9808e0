"""The rule contract shared by loaded, platform-supplied and built-in rules.

A rule is any callable taking the manifest content. It returns ``None``, a
single :class:`ValidationResult` (or an equivalent dict) or a list of them,
either directly or from a coroutine. Raising is the failure outcome, and so is
returning anything else.
"""

import inspect
from typing import Any, Awaitable, Callable, Union

from manifestcheck.models.results import ValidationResult

RuleOutcome = Union[None, ValidationResult, list[ValidationResult]]
RuleFunction = Callable[[dict[str, Any]], Union[RuleOutcome, Awaitable[RuleOutcome]]]

# Rule files loaded by path are registered under this prefix in sys.modules
RULE_MODULE_PREFIX = "manifestcheck._loaded_rules"


def rule_name(rule: RuleFunction) -> str:
    """Qualified name used when logging or reporting a rule."""
    module = getattr(rule, "__module__", None) or ""
    name = getattr(rule, "__qualname__", None) or getattr(rule, "__name__", None) or repr(rule)
    if module.startswith(f"{RULE_MODULE_PREFIX}."):
        # "<prefix>.<file stem>_<path digest>" -> "<file stem>"
        module = module[len(RULE_MODULE_PREFIX) + 1:].rsplit("_", 1)[0]
    return f"{module}.{name}" if module else name


def as_rule_list(exported: Any) -> list[RuleFunction]:
    """Normalize an exported rule value to a list of rules."""
    if exported is None:
        return []
    if isinstance(exported, (list, tuple)):
        return [rule for rule in exported if rule is not None]
    return [exported]


def as_result_list(outcome: Any) -> list[ValidationResult]:
    """Normalize a rule outcome to a (possibly empty) list of results.

    Plain dicts are validated into :class:`ValidationResult`.

    Raises:
        TypeError: If an item is neither a result nor a dict
        pydantic.ValidationError: If a dict is not a valid result
    """
    if outcome is None:
        return []
    items = outcome if isinstance(outcome, (list, tuple)) else [outcome]

    results = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, dict):
            item = ValidationResult.model_validate(item)
        elif not isinstance(item, ValidationResult):
            raise TypeError(f"rule returned {type(item).__name__}, expected ValidationResult")
        results.append(item)
    return results


async def call_rule(rule: RuleFunction, content: dict[str, Any]) -> RuleOutcome:
    """Invoke a rule once, awaiting it when it is asynchronous."""
    outcome = rule(content)
    if inspect.isawaitable(outcome):
        outcome = await outcome
    return outcome
