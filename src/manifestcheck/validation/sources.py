"""Sources that supply rule sets to the coordinator.

Platform packs only have to expose ``get_validation_rules(platforms)``; a
plain module with such a function qualifies as well as an object.
"""

import inspect
import logging
from pathlib import Path
from typing import Any, Awaitable, Iterable, Protocol, Union, runtime_checkable

from .loader import load_validation_rules
from .rule import RuleFunction

logger = logging.getLogger(__name__)


@runtime_checkable
class PlatformRuleSource(Protocol):
    """Anything able to hand out the rules for a set of platforms."""

    def get_validation_rules(
        self, platforms: list[str]
    ) -> Union[list[RuleFunction], Awaitable[list[RuleFunction]]]:
        ...


class FilesystemRuleSource:
    """Rules discovered by scanning a rule directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    async def get_validation_rules(self, platforms: list[str]) -> list[RuleFunction]:
        return await load_validation_rules(self.directory, platforms)

    def __repr__(self) -> str:
        return f"FilesystemRuleSource({str(self.directory)!r})"


class StaticRuleSource:
    """A fixed list of rules, optionally scoped to platforms.

    Args:
        rules: Rules returned for every request
        platform_rules: Extra rules keyed by platform tag, returned only when
            that platform is requested
    """

    def __init__(
        self,
        rules: Iterable[RuleFunction] = (),
        platform_rules: dict[str, Iterable[RuleFunction]] | None = None,
    ):
        self.rules = list(rules)
        self.platform_rules = {tag: list(items) for tag, items in (platform_rules or {}).items()}

    async def get_validation_rules(self, platforms: list[str]) -> list[RuleFunction]:
        rules = list(self.rules)
        for platform in platforms:
            rules.extend(self.platform_rules.get(platform, []))
        return rules

    def __repr__(self) -> str:
        return f"StaticRuleSource({len(self.rules)} rules, platforms={sorted(self.platform_rules)})"


async def fetch_rules(source: Any, platforms: list[str]) -> list[RuleFunction]:
    """Ask a source for its rules, awaiting the answer when it is asynchronous."""
    rules = source.get_validation_rules(list(platforms))
    if inspect.isawaitable(rules):
        rules = await rules
    rules = list(rules or [])
    logger.debug(f"{source_name(source)} supplied {len(rules)} rules for {platforms}")
    return rules


def source_name(source: Any) -> str:
    """Readable label for a source in logs and failure records."""
    name = getattr(source, "__name__", None)
    if name:
        return name
    if type(source).__repr__ is not object.__repr__:
        return repr(source)
    return type(source).__name__
