"""
Markdown tree walker.
[CTX:PBI-1:1-2:WALK]

Recursively collects documents under a docs directory. Hidden entries and
excluded directories are skipped at every depth; symbolic links are neither
followed nor listed.
"""
import logging
import unicodedata
from collections.abc import Iterable
from pathlib import Path

from .config import DEFAULT_EXCLUDED_DIRS

logger = logging.getLogger(__name__)


def sort_key(relative_path: str) -> tuple[str, str, str, str]:
    """
    Collation key that does not depend on the host locale.
    
    Letters compare ignoring accents and case first, then accents, then case
    with lowercase ahead of uppercase. The raw path breaks any remaining tie.
    """
    folded = relative_path.casefold()
    base = "".join(
        char for char in unicodedata.normalize("NFD", folded)
        if not unicodedata.combining(char)
    )
    return (base, folded, relative_path.swapcase(), relative_path)


def walk_markdown_files(
    root: str | Path,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    suffix: str = ".md",
) -> list[str]:
    """
    List documents under ``root``.
    
    Args:
        root: Directory to walk
        excluded_dirs: Directory names never descended into
        suffix: File name ending that marks a document
        
    Returns:
        Relative POSIX-style paths in collation order (see sort_key)
        
    Raises:
        OSError: If a directory cannot be listed
    """
    root = Path(root)
    excluded = frozenset(excluded_dirs)
    files: list[str] = []
    _collect(root, root, excluded, suffix, files)
    return sorted(files, key=sort_key)


def _collect(
    directory: Path,
    base: Path,
    excluded: frozenset[str],
    suffix: str,
    files: list[str],
) -> None:
    logger.debug("Walking %s", directory)
    for entry in directory.iterdir():
        if entry.name.startswith("."):
            continue
        if entry.is_symlink():
            continue
        
        if entry.is_dir():
            if entry.name in excluded:
                logger.debug("Skipping excluded directory %s", entry)
                continue
            _collect(entry, base, excluded, suffix, files)
        elif entry.is_file() and entry.name.endswith(suffix):
            files.append(entry.relative_to(base).as_posix())
