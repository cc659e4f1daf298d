import logging
import shutil
from pathlib import Path
from typing import List


logger = logging.getLogger(__name__)


# Config files the starter owns. Always replaced, even if the generator wrote one.
OVERWRITE_NAMES = frozenset({
    ".eslintrc.json",
    ".prettierrc",
    "tailwind.config.js",
    "next-i18next.config.js",
    "schema.prisma",
})

# Source and style files are replaced as well, whatever feature they belong to.
OVERWRITE_EXTENSIONS = frozenset({".css", ".ts", ".tsx"})


def should_overwrite(filename: str) -> bool:
    return filename in OVERWRITE_NAMES or Path(filename).suffix in OVERWRITE_EXTENSIONS


def merge_templates(source_root: Path, dest_root: Path) -> List[Path]:
    """
    Merge a template tree into a destination tree.

    Directories are created on demand. A file is copied when the destination
    has no such file yet, or when ``should_overwrite`` says the starter owns it.
    Nothing in the destination is ever deleted. A missing ``source_root`` is a
    no-op.

    Returns the destination paths that were written.
    """
    source_root = Path(source_root)
    dest_root = Path(dest_root)

    if not source_root.exists():
        logger.debug(f"No templates at {source_root}, nothing to merge")
        return []

    copied = []
    for entry in sorted(source_root.iterdir()):
        dest_path = dest_root / entry.name

        if entry.is_dir():
            dest_path.mkdir(parents=True, exist_ok=True)
            copied.extend(merge_templates(entry, dest_path))
        elif not dest_path.exists() or should_overwrite(entry.name):
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry, dest_path)
            logger.info(f"Copied {dest_path}")
            copied.append(dest_path)

    return copied
