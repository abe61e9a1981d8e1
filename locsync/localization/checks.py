"""Key-set and placeholder checks shared by merge and validate."""

from typing import Iterable, List, Mapping


def count_pattern(text: str, pattern: str) -> int:
    """Count non-overlapping occurrences of the literal ``pattern`` in ``text``."""
    return len(text.split(pattern)) - 1


def same_keys(a: Mapping[str, str], b: Mapping[str, str]) -> bool:
    """True if both mappings have exactly the same keys."""
    return len(a) == len(b) and all(key in b for key in a)


def check_placeholders(
    filename: str,
    key: str,
    source: str,
    translation: str,
    patterns: Iterable[str],
) -> List[str]:
    """Return one error per pattern whose count differs between source and translation."""
    errors = []
    for pattern in patterns:
        source_count = count_pattern(source, pattern)
        translation_count = count_pattern(translation, pattern)
        if source_count != translation_count:
            errors.append(
                f"{filename}[{key}]: incorrect number of `{pattern}` found "
                f"({source_count}:{translation_count})"
            )
    return errors
