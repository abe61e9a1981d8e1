"""Resolve what to run, run it over every target file, collect one report."""

from enum import Enum
from typing import List, Optional

import structlog

from locsync.config import Settings
from locsync.errors import UsageError, log_errors
from locsync.localization import (
    Manifest,
    Report,
    load_manifest,
    load_translation,
    merge_file,
    new_targets,
    validate_file,
)

logger = structlog.get_logger(__name__)


class Command(str, Enum):
    MERGE = "merge"
    VALIDATE = "validate"

    @classmethod
    def names(cls) -> List[str]:
        return [command.value for command in cls]

    @classmethod
    def parse(cls, name: Optional[str]) -> "Command":
        """Turn a command line word into a Command, case-insensitively."""
        if name is None:
            message = "No command provided"
        else:
            name = name.lower()
            if name in cls.names():
                return cls(name)
            message = f'Command "{name}" does not exist'

        raise UsageError(f"{message}\nAvailable commands: {', '.join(cls.names())}", command=name)


def resolve_targets(manifest: Manifest, arg: Optional[str] = None) -> List[str]:
    """Pick the files to process.

    ``arg`` is either one known target file, or the path of a previous
    manifest to compare against, or None for every target.
    """
    if arg and arg in manifest.target_files():
        return [arg]
    if arg:
        return new_targets(manifest, arg)
    return manifest.target_files()


@log_errors(operation_name="run")
def run(command: Command, arg: Optional[str], settings: Settings) -> Report:
    """Run ``command`` over the resolved targets and return the aggregated report."""
    manifest = load_manifest(settings.manifest_path)
    source = load_translation(settings.resolve(manifest.source_file))
    targets = resolve_targets(manifest, arg)

    logger.info(
        "Running command",
        command=command.value,
        source=manifest.source_file,
        targets=targets,
    )

    report = Report()
    for filename in targets:
        match command:
            case Command.MERGE:
                merge_file(filename, source, settings, report)
            case Command.VALIDATE:
                validate_file(filename, source, settings, report)

    log_method = logger.warning if report.has_problems else logger.info
    log_method(
        "Command finished",
        command=command.value,
        processed=len(targets),
        changed=len(report.changed),
        errors=len(report.errors),
        warnings=len(report.warnings),
    )
    return report
