"""Find translation files added since a previous manifest."""

from pathlib import Path
from typing import List, Optional, Union

import structlog

from .manifest import Manifest, TranslationIndex, load_manifest

logger = structlog.get_logger(__name__)


def new_targets(manifest: Manifest, prior_manifest_path: Optional[Union[str, Path]] = None) -> List[str]:
    """Target files present in ``manifest`` but not in the prior manifest.

    Falls back to every target file when there is no prior manifest, when the
    prior manifest does not exist, or when nothing is new.
    """
    targets = manifest.target_files()

    if prior_manifest_path is None:
        return targets

    prior_path = Path(prior_manifest_path)
    if not prior_path.exists():
        logger.warning("Previous manifest not found, using all translations", file=str(prior_path))
        return targets

    # Only the prior translations table matters; the current source file is excluded from it.
    source = manifest.source_file
    prior_files = load_manifest(prior_path, TranslationIndex).files()
    prior_targets = {file for file in prior_files if file != source}
    added = [target for target in targets if target not in prior_targets]

    if not added:
        logger.info("No new translations since previous manifest, using all", file=str(prior_path))
        return targets

    logger.info("New translations found", files=added)
    return added
