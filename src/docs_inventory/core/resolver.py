"""
Docs directory resolution.
[CTX:PBI-1:1-1:RESOLVE]

Determines which directory the inventory scans. Candidates are tried in a
fixed order and the first match wins:

1. ``--docs <path>``
2. ``--root <path>`` (docs at ``<root>/docs``)
3. ``DOCS_DIR`` environment variable
4. ``DOCS_ROOT`` environment variable (docs at ``<DOCS_ROOT>/docs``)
5. ``<cwd>/docs`` if it exists
6. ``<repo_root>/docs`` if cwd is inside the repository and it exists

The help flag is handled by the caller before resolution starts.
"""
import logging
import os
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import DocsRootError

logger = logging.getLogger(__name__)

DOCS_FLAG = "--docs"
ROOT_FLAG = "--root"
HELP_FLAGS = ("--help", "-h")
DOCS_DIR_ENV = "DOCS_DIR"
DOCS_ROOT_ENV = "DOCS_ROOT"

USAGE = (
    "Usage: docs-list [--docs <path>] [--root <path>]\n"
    "  --docs <path>  Explicit docs directory.\n"
    "  --root <path>  Repo root; docs assumed at <root>/docs.\n"
    "Env vars: DOCS_DIR or DOCS_ROOT."
)

NOT_FOUND_MESSAGE = (
    "docs directory not found. Provide --docs <path>, --root <path>, "
    "or set DOCS_DIR/DOCS_ROOT."
)

REPO_ROOT = Path(__file__).parents[3]


class Provenance(Enum):
    """Which resolution rule produced the docs directory."""
    DOCS_FLAG = "docs_flag"
    ROOT_FLAG = "root_flag"
    DOCS_DIR_ENV = "docs_dir_env"
    DOCS_ROOT_ENV = "docs_root_env"
    CWD_DEFAULT = "cwd_default"
    REPO_DEFAULT = "repo_default"


@dataclass(frozen=True)
class ResolvedDocsRoot:
    """
    An absolute docs directory and the rule that selected it.
    
    Attributes:
        path: Absolute, lexically normalized docs directory
        provenance: Resolution rule that won
    """
    path: Path
    provenance: Provenance


@dataclass
class Invocation:
    """
    Everything resolution depends on, passed in explicitly.
    
    Attributes:
        args: Command-line arguments without the program name
        environ: Environment variables
        cwd: Absolute current working directory
        repo_root: Absolute repository root used for the final fallback
    """
    args: list[str] = field(default_factory=list)
    environ: Mapping[str, str] = field(default_factory=dict)
    cwd: Path = field(default_factory=Path.cwd)
    repo_root: Path = REPO_ROOT
    
    @classmethod
    def from_process(cls) -> "Invocation":
        """Capture the current process state."""
        return cls(
            args=sys.argv[1:],
            environ=dict(os.environ),
            cwd=Path.cwd(),
            repo_root=REPO_ROOT,
        )


def wants_help(args: list[str]) -> bool:
    """Return True if any help flag was passed."""
    return any(arg in HELP_FLAGS for arg in args)


def read_flag_value(args: list[str], flag: str) -> str | None:
    """
    Read the value following the first occurrence of ``flag``.
    
    Returns:
        None if the flag is absent, an empty string if the value is missing
        or looks like another flag, otherwise the value.
    """
    try:
        idx = args.index(flag)
    except ValueError:
        return None
    
    value = args[idx + 1] if idx + 1 < len(args) else ""
    if not value or value.startswith("-"):
        return ""
    return value


def absolute_path(base: Path, *parts: str) -> Path:
    """Join ``parts`` onto ``base`` and normalize without touching the filesystem."""
    return Path(os.path.normpath(os.path.join(base, *parts)))


def is_inside(path: Path, root: Path) -> bool:
    """Return True if ``path`` is ``root`` or one of its descendants."""
    return path == root or root in path.parents


def _env_value(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


def resolve_docs_root(
    invocation: Invocation,
    exists: Callable[[Path], bool] = Path.exists,
) -> ResolvedDocsRoot:
    """
    Resolve the docs directory for an invocation.
    
    Args:
        invocation: Arguments, environment and directories to resolve against
        exists: Existence check used for the default locations
        
    Returns:
        ResolvedDocsRoot for the first rule that applies
        
    Raises:
        DocsRootError: If a directory flag has no value, or nothing resolves
    """
    args = invocation.args
    cwd = absolute_path(invocation.cwd)
    
    docs_arg = read_flag_value(args, DOCS_FLAG)
    if docs_arg is not None:
        if not docs_arg:
            raise DocsRootError(f"{DOCS_FLAG} requires a path.")
        return _resolved(absolute_path(cwd, docs_arg), Provenance.DOCS_FLAG)
    
    root_arg = read_flag_value(args, ROOT_FLAG)
    if root_arg is not None:
        if not root_arg:
            raise DocsRootError(f"{ROOT_FLAG} requires a path.")
        return _resolved(absolute_path(cwd, root_arg, "docs"), Provenance.ROOT_FLAG)
    
    docs_dir_env = _env_value(invocation.environ, DOCS_DIR_ENV)
    if docs_dir_env:
        return _resolved(absolute_path(cwd, docs_dir_env), Provenance.DOCS_DIR_ENV)
    
    docs_root_env = _env_value(invocation.environ, DOCS_ROOT_ENV)
    if docs_root_env:
        return _resolved(
            absolute_path(cwd, docs_root_env, "docs"), Provenance.DOCS_ROOT_ENV
        )
    
    cwd_docs = absolute_path(cwd, "docs")
    if exists(cwd_docs):
        return _resolved(cwd_docs, Provenance.CWD_DEFAULT)
    
    repo_root = absolute_path(cwd, str(invocation.repo_root))
    repo_docs = absolute_path(repo_root, "docs")
    if is_inside(cwd, repo_root) and exists(repo_docs):
        return _resolved(repo_docs, Provenance.REPO_DEFAULT)
    
    raise DocsRootError(NOT_FOUND_MESSAGE)


def _resolved(path: Path, provenance: Provenance) -> ResolvedDocsRoot:
    logger.info("Resolved docs directory %s via %s", path, provenance.value)
    return ResolvedDocsRoot(path=path, provenance=provenance)
