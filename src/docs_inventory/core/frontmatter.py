"""
Front matter extraction.
[CTX:PBI-1:1-3:FRONTMATTER]

Documents open with a metadata block delimited by ``---`` lines. Only two
keys are read from it:

- ``summary:`` a one-line description, optionally quoted
- ``read_when:`` hints, either as an inline list (``['a', 'b']``) or as
  ``- item`` lines following the key (a quoted item loses its quotes)

This is deliberately a narrow line-based reader, not a YAML parser. A
malformed inline hint list is ignored rather than reported, while summary
problems are reported as diagnostics.
"""
import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DELIMITER = "---"
SUMMARY_KEY = "summary:"
READ_WHEN_KEY = "read_when:"
LIST_ITEM_PREFIX = "- "

_EDGE_QUOTES = re.compile(r"^['\"]|['\"]$")
_WHITESPACE = re.compile(r"\s+")


class FrontMatterError(str, Enum):
    """Diagnostic reasons reported next to a document."""
    MISSING = "missing-front-matter"
    UNTERMINATED = "unterminated-front-matter"
    SUMMARY_KEY_MISSING = "summary-key-missing"
    SUMMARY_EMPTY = "summary-empty"
    UNREADABLE = "unreadable"


@dataclass
class FrontMatterResult:
    """
    Outcome of reading one document's metadata block.
    
    Attributes:
        summary: Normalized summary, None when extraction failed
        read_when: Hints in document order, kept even on failure
        error: Diagnostic reason, None on success
    """
    summary: str | None = None
    read_when: list[str] = field(default_factory=list)
    error: FrontMatterError | None = None
    
    @property
    def ok(self) -> bool:
        """True when a summary was extracted."""
        return self.summary is not None and self.error is None


def compact_strings(values: list[Any]) -> list[str]:
    """Stringify and trim values, dropping None and blanks."""
    result = []
    for value in values:
        if value is None:
            continue
        normalized = str(value).strip()
        if normalized:
            result.append(normalized)
    return result


def parse_inline_list(text: str) -> list[str]:
    """
    Parse an inline hint list such as ``['a', "b"]``.
    
    Single quotes are treated as double quotes. Anything that does not parse
    as a list yields no hints.
    """
    try:
        parsed = json.loads(text.replace("'", '"'))
    except ValueError:
        logger.debug("Ignoring malformed inline read_when list: %s", text)
        return []
    if not isinstance(parsed, list):
        return []
    return compact_strings(parsed)


def unquote(text: str) -> str:
    """Remove one matching pair of surrounding quotes, if present."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        return text[1:-1].strip()
    return text


def normalize_summary(raw: str) -> str:
    """Strip edge quotes, collapse whitespace runs and trim."""
    unquoted = _EDGE_QUOTES.sub("", raw.strip())
    return _WHITESPACE.sub(" ", unquoted).strip()


def extract_front_matter(content: str) -> FrontMatterResult:
    """
    Extract summary and read_when hints from document text.
    
    Args:
        content: Full document text
        
    Returns:
        FrontMatterResult with either a summary or a diagnostic reason
    """
    if not content.startswith(DELIMITER):
        return FrontMatterResult(error=FrontMatterError.MISSING)
    
    end_index = content.find("\n" + DELIMITER, len(DELIMITER))
    if end_index == -1:
        return FrontMatterResult(error=FrontMatterError.UNTERMINATED)
    
    block = content[len(DELIMITER):end_index].strip()
    
    summary_line: str | None = None
    read_when: list[str] = []
    collecting = False
    
    for raw_line in block.split("\n"):
        line = raw_line.strip()
        
        if line.startswith(SUMMARY_KEY):
            summary_line = line
            collecting = False
            continue
        
        if line.startswith(READ_WHEN_KEY):
            collecting = True
            inline = line[len(READ_WHEN_KEY):].strip()
            if inline.startswith("[") and inline.endswith("]"):
                read_when.extend(parse_inline_list(inline))
            continue
        
        if collecting:
            if line.startswith(LIST_ITEM_PREFIX):
                hint = unquote(line[len(LIST_ITEM_PREFIX):].strip())
                if hint:
                    read_when.append(hint)
            elif line:
                collecting = False
    
    if summary_line is None:
        return FrontMatterResult(
            read_when=read_when, error=FrontMatterError.SUMMARY_KEY_MISSING
        )
    
    summary = normalize_summary(summary_line[len(SUMMARY_KEY):])
    if not summary:
        return FrontMatterResult(read_when=read_when, error=FrontMatterError.SUMMARY_EMPTY)
    
    return FrontMatterResult(summary=summary, read_when=read_when)


def read_front_matter(path: str | Path) -> FrontMatterResult:
    """
    Read a document from disk and extract its front matter.
    
    A file that cannot be read is reported as ``unreadable`` so it still
    appears in the listing.
    """
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return FrontMatterResult(error=FrontMatterError.UNREADABLE)
    return extract_front_matter(content)
