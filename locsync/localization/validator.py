"""Check a translation against the source-of-truth language without changing it."""

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping

import structlog

from locsync.config import Settings

from .checks import check_placeholders
from .report import Report
from .store import load_translation

logger = structlog.get_logger(__name__)


@dataclass
class ValidationIssues:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate(
    target: Mapping[str, str],
    source: Mapping[str, str],
    filename: str,
    patterns: Iterable[str],
) -> ValidationIssues:
    """Collect placeholder errors and untranslated warnings for ``target``.

    Keys that no longer exist in the source are skipped.
    """
    patterns = list(patterns)
    issues = ValidationIssues()

    for key, value in target.items():
        if key not in source:
            continue
        issues.errors.extend(check_placeholders(filename, key, source[key], value, patterns))
        if source[key] == value:
            issues.warnings.append(f"{filename}[{key}]: might be untranslated")

    return issues


def validate_file(filename: str, source: Mapping[str, str], settings: Settings, report: Report) -> ValidationIssues:
    target = load_translation(settings.resolve(filename))

    issues = validate(target, source, filename, settings.placeholder_patterns)
    report.extend(errors=issues.errors, warnings=issues.warnings)

    logger.debug("Translation validated", file=filename, errors=len(issues.errors), warnings=len(issues.warnings))
    return issues
