"""
Command-line entry point for the docs inventory.

This is the only place that touches the process: it reads arguments and
environment, prints to stdout/stderr and turns failures into exit codes.
"""
import logging
import sys
from collections.abc import Mapping
from pathlib import Path

from docs_inventory.core import (
    DocsInventoryError,
    Invocation,
    ListingStats,
    build_listing,
    load_config,
    resolve_docs_root,
    wants_help,
    write_report,
)
from docs_inventory.core.resolver import USAGE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_ERROR = 1


def configure_logging(level: int) -> None:
    """Send log records to stderr so stdout carries only the report."""
    logging.basicConfig(level=level, stream=sys.stderr, format=LOG_FORMAT)


def main(
    argv: list[str] | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
    repo_root: str | Path | None = None,
) -> int:
    """
    Run the listing and return an exit code.
    
    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        environ: Environment variables (defaults to os.environ)
        cwd: Working directory to resolve against (defaults to Path.cwd())
        repo_root: Repository root for the final fallback
        
    Returns:
        0 on help or a completed listing, 1 on a fatal error
    """
    invocation = Invocation.from_process()
    if argv is not None:
        invocation.args = list(argv)
    if environ is not None:
        invocation.environ = dict(environ)
    if cwd is not None:
        invocation.cwd = Path(cwd).absolute()
    if repo_root is not None:
        invocation.repo_root = Path(repo_root)
    
    if wants_help(invocation.args):
        print(USAGE)
        return EXIT_OK
    
    try:
        resolved = resolve_docs_root(invocation)
        config = load_config(environ=dict(invocation.environ))
        configure_logging(config.numeric_log_level)
        stats = ListingStats(docs_dir=str(resolved.path))
        entries = build_listing(resolved.path, config=config, stats=stats)
    except DocsInventoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        logger.error("Listing failed: %s", e)
        print(f"Error: could not list docs directory: {e}", file=sys.stderr)
        return EXIT_ERROR
    
    write_report(resolved.path, entries)
    stats.emit(format_json=config.log_format == "json")
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
