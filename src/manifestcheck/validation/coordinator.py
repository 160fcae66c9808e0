"""Validation of a manifest against common and platform rule sets.

Common rules come from the built-in rule directory (or a configured one);
each platform source contributes its own rules. All sets run against the same
manifest and their results are merged into one report.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable

from manifestcheck.config import ManifestCheckConfig, create_default_config
from manifestcheck.constants import BASE_MANIFEST_FORMAT
from manifestcheck.models.manifest import ManifestInfo
from manifestcheck.models.results import ValidationReport, ValidationResult

from .errors import EmptyDocumentError, WrongFormatError
from .executor import run_validation_rules
from .loader import load_validation_rules
from .sources import fetch_rules, source_name

logger = logging.getLogger(__name__)

BUILTIN_RULES_DIR = Path(__file__).parent / "rules"


def check_manifest(manifest_info: ManifestInfo | None, base_format: str = BASE_MANIFEST_FORMAT) -> None:
    """Check the preconditions a manifest must meet before any rule runs.

    Raises:
        EmptyDocumentError: If there is no manifest or its content is missing
        WrongFormatError: If the manifest is not in ``base_format``
    """
    if manifest_info is None or manifest_info.content is None:
        raise EmptyDocumentError()

    if manifest_info.format != base_format:
        raise WrongFormatError(manifest_info.format, base_format)


class ManifestValidator:
    """Runs common and platform rules against manifests."""

    def __init__(self, config: ManifestCheckConfig | None = None, rules_dir: str | Path | None = None):
        self.config = config or create_default_config()
        rules_dir = rules_dir or self.config.validation.rules_dir
        self.rules_dir = Path(rules_dir) if rules_dir else BUILTIN_RULES_DIR

    async def validate(
        self,
        manifest_info: ManifestInfo,
        platform_sources: Iterable[Any] = (),
        platforms: Iterable[str] | None = None,
    ) -> ValidationReport:
        """Validate a manifest and return the full report.

        Args:
            manifest_info: Manifest to validate
            platform_sources: Objects exposing ``get_validation_rules(platforms)``
            platforms: Requested platform tags (default: configured platforms)

        Returns:
            ValidationReport with merged results and any rule failures

        Raises:
            EmptyDocumentError: If the manifest content is missing
            WrongFormatError: If the manifest is not in the base format
            DirectoryReadError: If the common rule directory cannot be read
        """
        settings = self.config.validation
        check_manifest(manifest_info, settings.base_format)

        platforms = list(settings.platforms if platforms is None else platforms)
        sources = list(platform_sources)
        report = ValidationReport(fail_on_warnings=settings.fail_on_warnings)

        logger.info(f"Validating manifest for platforms {platforms} with rules from {self.rules_dir}")

        common_rules = await load_validation_rules(self.rules_dir, platforms)
        await run_validation_rules(manifest_info, common_rules, report, settings.rule_timeout)

        async def run_platform(source: Any) -> list[ValidationResult]:
            rules = await fetch_rules(source, platforms)
            return await run_validation_rules(manifest_info, rules, report, settings.rule_timeout)

        outcomes = await asyncio.gather(
            *(run_platform(source) for source in sources),
            return_exceptions=True,
        )

        for source, outcome in zip(sources, outcomes):
            if isinstance(outcome, Exception):
                name = source_name(source)
                logger.warning(f"Platform rules from {name} failed: {outcome}")
                report.record_failure(name, outcome, platform=getattr(source, "platform", None))

        logger.info(
            f"Validation completed with status: {report.status.value} "
            f"({len(report.results)} results, {len(report.failures)} failures)"
        )
        return report


async def validate_manifest(
    manifest_info: ManifestInfo,
    platform_sources: Iterable[Any],
    platforms: Iterable[str],
    *,
    rules_dir: str | Path | None = None,
    config: ManifestCheckConfig | None = None,
) -> list[ValidationResult]:
    """Validate a manifest against the common rules and every platform's rules.

    Returns:
        Merged results; their order follows rule completion, not submission
    """
    validator = ManifestValidator(config=config, rules_dir=rules_dir)
    report = await validator.validate(manifest_info, platform_sources, platforms)
    return report.results
