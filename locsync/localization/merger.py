"""Bring a translation's key set in line with the source-of-truth language."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

import structlog

from locsync.config import Settings

from .checks import check_placeholders, same_keys
from .report import Report
from .store import load_translation, save_translation

logger = structlog.get_logger(__name__)


@dataclass
class MergeResult:
    mapping: Dict[str, str]
    changed: bool
    errors: List[str] = field(default_factory=list)


def merge(
    target: Mapping[str, str],
    source: Mapping[str, str],
    filename: str,
    patterns: Iterable[str],
) -> MergeResult:
    """Merge ``target`` onto the keys of ``source``.

    The result has exactly the source's keys, in the source's order. Keys the
    target already translates keep the target's value; new keys carry the
    source text. Placeholder mismatches are reported but do not stop the merge.
    """
    patterns = list(patterns)
    merged = dict(source)
    errors = []

    for key, value in target.items():
        if key not in merged:
            continue
        errors.extend(check_placeholders(filename, key, source[key], value, patterns))
        merged[key] = value

    return MergeResult(mapping=merged, changed=not same_keys(merged, target), errors=errors)


def merge_file(filename: str, source: Mapping[str, str], settings: Settings, report: Report) -> MergeResult:
    """Merge one translation file on disk, rewriting it only if its keys changed."""
    path = settings.resolve(filename)
    target = load_translation(path)

    result = merge(target, source, filename, settings.placeholder_patterns)
    report.extend(errors=result.errors)

    if result.changed:
        save_translation(path, result.mapping, indent=settings.indent)
        report.mark_changed(filename)
        logger.info(
            "Translation keys updated",
            file=filename,
            added=sum(1 for key in result.mapping if key not in target),
            removed=sum(1 for key in target if key not in result.mapping),
        )
    else:
        logger.debug("Translation keys already in sync", file=filename)

    return result
