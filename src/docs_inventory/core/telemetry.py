"""
Run statistics for a listing.
[CTX:PBI-1:1-6:TELEM]

Tracks how many documents were listed, how many carried a usable summary
and which diagnostics were reported, and emits them as one structured log
line in JSON or key=value format.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from .frontmatter import FrontMatterResult

logger = logging.getLogger(__name__)


@dataclass
class ListingStats:
    """
    Aggregated statistics for one listing run.
    
    Attributes:
        docs_dir: Directory that was listed
        files: Documents listed
        documented: Documents with a summary
        with_hints: Documents with at least one read_when hint
        diagnostics: Count of documents per diagnostic reason
    """
    docs_dir: str = ""
    files: int = 0
    documented: int = 0
    with_hints: int = 0
    diagnostics: Dict[str, int] = field(default_factory=dict)
    
    def record(self, result: FrontMatterResult) -> None:
        """Account for one document's extraction result."""
        self.files += 1
        if result.read_when:
            self.with_hints += 1
        if result.ok:
            self.documented += 1
        elif result.error is not None:
            reason = result.error.value
            self.diagnostics[reason] = self.diagnostics.get(reason, 0) + 1
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "docs_dir": self.docs_dir,
            "files": self.files,
            "documented": self.documented,
            "with_hints": self.with_hints,
            "diagnostics": dict(sorted(self.diagnostics.items())),
        }
    
    def to_json(self) -> str:
        """Convert stats to JSON string."""
        return json.dumps(self.to_dict(), default=str)
    
    def to_keyvalue(self) -> str:
        """Convert stats to key=value format, one pair per diagnostic reason."""
        data = self.to_dict()
        diagnostics = data.pop("diagnostics")
        pairs = [f"{key}={value}" for key, value in data.items()]
        pairs.extend(f"diagnostics.{reason}={count}" for reason, count in diagnostics.items())
        return " ".join(pairs)
    
    def emit(self, format_json: bool = False) -> None:
        """Log the statistics at INFO level."""
        message = self.to_json() if format_json else self.to_keyvalue()
        logger.info("listing stats %s", message)
