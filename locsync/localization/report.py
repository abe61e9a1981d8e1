"""Run report shared by every processed translation file."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

import structlog

from .store import dump_json

logger = structlog.get_logger(__name__)


@dataclass
class Report:
    """Append-only record of what a run changed and found."""

    changed: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def mark_changed(self, filename: str) -> None:
        self.changed.append(filename)

    def extend(self, errors: Iterable[str] = (), warnings: Iterable[str] = ()) -> None:
        self.errors.extend(errors)
        self.warnings.extend(warnings)

    @property
    def has_problems(self) -> bool:
        return bool(self.errors or self.warnings)

    def to_dict(self) -> Dict[str, List[str]]:
        return asdict(self)

    def to_json(self, indent: int = 4) -> str:
        return dump_json(self.to_dict(), indent=indent)

    def dump(self, path: Path, indent: int = 4) -> None:
        """Write the report as pretty-printed JSON."""
        path.write_text(self.to_json(indent=indent), encoding="utf-8")
        logger.info(
            "Report written",
            file=str(path),
            changed=len(self.changed),
            errors=len(self.errors),
            warnings=len(self.warnings),
        )
