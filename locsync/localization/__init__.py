"""Translation file merging and validation."""

from .checks import check_placeholders, count_pattern, same_keys
from .differ import new_targets
from .manifest import Manifest, TranslationEntry, TranslationIndex, load_manifest
from .merger import MergeResult, merge, merge_file
from .report import Report
from .store import load_translation, save_translation
from .validator import ValidationIssues, validate, validate_file

__all__ = [
    "Manifest",
    "MergeResult",
    "Report",
    "TranslationEntry",
    "TranslationIndex",
    "ValidationIssues",
    "check_placeholders",
    "count_pattern",
    "load_manifest",
    "load_translation",
    "merge",
    "merge_file",
    "new_targets",
    "same_keys",
    "save_translation",
    "validate",
    "validate_file",
]
