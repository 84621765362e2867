"""
Listing report.
[CTX:PBI-1:1-4:REPORT]

Pairs each walked document with its front matter and renders the
human-readable inventory followed by a closing reminder.
"""
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import ListingConfig
from .frontmatter import FrontMatterResult, read_front_matter
from .telemetry import ListingStats
from .walker import walk_markdown_files

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "Listing all markdown files in docs folder: {docs_dir}"

REMINDER = (
    "Reminder: keep docs up to date as behavior changes. When your task matches "
    'any "Read when" hint above (React hooks, cache directives, database work, '
    "tests, etc.), read that doc before coding, and suggest new coverage when "
    "it is missing."
)


@dataclass
class ListingEntry:
    """A document's relative path and its extraction result."""
    path: str
    result: FrontMatterResult


def build_listing(
    docs_dir: str | Path,
    config: ListingConfig | None = None,
    stats: ListingStats | None = None,
) -> list[ListingEntry]:
    """
    Walk ``docs_dir`` and extract front matter for every document, in order.
    
    Args:
        docs_dir: Resolved docs directory
        config: Listing configuration (defaults apply when None)
        stats: Optional statistics to update per document
        
    Returns:
        One ListingEntry per document, in walk order
    """
    config = config or ListingConfig()
    docs_dir = Path(docs_dir)
    
    entries = []
    for relative_path in walk_markdown_files(
        docs_dir, excluded_dirs=config.excluded_dirs, suffix=config.suffix
    ):
        result = read_front_matter(docs_dir / relative_path)
        if stats is not None:
            stats.record(result)
        entries.append(ListingEntry(path=relative_path, result=result))
    
    logger.debug("Collected %d documents from %s", len(entries), docs_dir)
    return entries


def format_entry(path: str, result: FrontMatterResult) -> list[str]:
    """Render the report line(s) for one document."""
    if result.ok:
        lines = [f"{path} - {result.summary}"]
        if result.read_when:
            lines.append(f"  Read when: {'; '.join(result.read_when)}")
        return lines
    
    if result.error is None:
        return [path]
    return [f"{path} - [{result.error.value}]"]


def render_report(docs_dir: str | Path, entries: Iterable[ListingEntry]) -> str:
    """Render the full report, newline terminated."""
    lines = [HEADER_TEMPLATE.format(docs_dir=docs_dir)]
    for entry in entries:
        lines.extend(format_entry(entry.path, entry.result))
    lines.append("")
    lines.append(REMINDER)
    return "\n".join(lines) + "\n"


def write_report(
    docs_dir: str | Path,
    entries: Iterable[ListingEntry],
    stream: TextIO | None = None,
) -> None:
    """Write the rendered report to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(render_report(docs_dir, entries))
