"""Core resolution, walking, extraction and reporting for the docs inventory."""

from docs_inventory.core.config import (
    ListingConfig,
    load_config,
    validate_config,
)
from docs_inventory.core.errors import (
    ConfigValidationError,
    DocsInventoryError,
    DocsRootError,
)
from docs_inventory.core.frontmatter import (
    FrontMatterError,
    FrontMatterResult,
    extract_front_matter,
    read_front_matter,
)
from docs_inventory.core.report import (
    ListingEntry,
    build_listing,
    format_entry,
    render_report,
    write_report,
)
from docs_inventory.core.resolver import (
    Invocation,
    Provenance,
    ResolvedDocsRoot,
    resolve_docs_root,
    wants_help,
)
from docs_inventory.core.telemetry import ListingStats
from docs_inventory.core.walker import walk_markdown_files

__all__ = [
    # config
    "ListingConfig",
    "load_config",
    "validate_config",
    # errors
    "ConfigValidationError",
    "DocsInventoryError",
    "DocsRootError",
    # frontmatter
    "FrontMatterError",
    "FrontMatterResult",
    "extract_front_matter",
    "read_front_matter",
    # report
    "ListingEntry",
    "build_listing",
    "format_entry",
    "render_report",
    "write_report",
    # resolver
    "Invocation",
    "Provenance",
    "ResolvedDocsRoot",
    "resolve_docs_root",
    "wants_help",
    # telemetry
    "ListingStats",
    # walker
    "walk_markdown_files",
]
