"""Discovery and loading of rule modules from a directory tree.

A rule directory holds rule files next to optional subfolders named after
platform tags. Only the first level of subfolders is filtered against the
requested platforms; everything below a matched platform folder is loaded
unconditionally.
"""

import asyncio
import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Iterable

from .errors import DirectoryReadError, RuleLoadError
from .rule import RULE_MODULE_PREFIX, RuleFunction, as_rule_list

logger = logging.getLogger(__name__)


async def load_validation_rules(
    directory: str | Path,
    platforms: Iterable[str] | None = None,
) -> list[RuleFunction]:
    """Load every rule found in a rule directory.

    Args:
        directory: Rule directory to scan
        platforms: Platform tags whose subfolders should be descended into

    Returns:
        Loaded rules, in the listing order of the entries that produced them

    Raises:
        DirectoryReadError: If the directory cannot be listed
    """
    directory = Path(directory)
    platforms = set(platforms or [])

    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    outcomes = await asyncio.gather(
        *(_load_entry(entry, platforms) for entry in entries),
        return_exceptions=True,
    )

    rules: list[RuleFunction] = []
    for entry, outcome in zip(entries, outcomes):
        if isinstance(outcome, Exception):
            logger.warning(f"{outcome}")
            continue
        rules.extend(outcome)

    logger.debug(f"Loaded {len(rules)} validation rules from {directory}")
    return rules


async def _load_entry(entry: Path, platforms: set[str]) -> list[RuleFunction]:
    if entry.is_dir():
        if entry.name not in platforms:
            return []
        # Platform folders load their whole subtree
        return await load_validation_rules(entry, [])

    if not is_rule_file(entry):
        return []

    return as_rule_list(import_rule_module(entry))


def is_rule_file(path: Path) -> bool:
    """Rule files are Python sources not marked private with a leading underscore."""
    return path.is_file() and path.suffix == ".py" and not path.name.startswith("_")


def import_rule_module(path: Path):
    """Execute a rule file and return the value it exports.

    The exported value is the module's ``rules`` attribute, or ``rule`` when
    ``rules`` is not defined.

    Raises:
        RuleLoadError: If the file cannot be executed or exports something
            other than a rule or a list of rules
    """
    module_name = f"{RULE_MODULE_PREFIX}.{_module_id(path)}"

    try:
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"No module loader available for {path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise RuleLoadError(path, e) from e

    exported = getattr(module, "rules", None)
    if exported is None:
        exported = getattr(module, "rule", None)

    invalid = [rule for rule in as_rule_list(exported) if not callable(rule)]
    if invalid:
        sys.modules.pop(module_name, None)
        raise RuleLoadError(path, TypeError(f"exported value is not callable: {invalid[0]!r}"))

    return exported


def _module_id(path: Path) -> str:
    """Stable, import-safe module name for a rule file."""
    digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:12]
    stem = "".join(c if c.isalnum() else "_" for c in path.stem)
    return f"{stem}_{digest}"
