"""Catalog discovery and frontmatter parsing."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import yaml

from ..globs import should_ignore_file
from .errors import CatalogLoadError
from .resources import COLLECTION_DIRS, CatalogFile, ParsedResource, ResourceType

log = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)

DOCUMENT_SUFFIXES = (".md", ".mdx")
INDEX_FILES = ("index.md", "index.mdx")
SKIPPED_DIRS = {"node_modules", "dist", ".eventcatalog", ".git"}
FLAT_RESOURCE_TYPES = (ResourceType.USER, ResourceType.TEAM)


@dataclass
class ParseFailure:
    """A catalog file that could not be parsed."""

    file: CatalogFile
    message: str


def resolve_catalog_file(root: Path, path: Path) -> CatalogFile | None:
    """Work out which resource a document describes from where it is stored.

    Args:
        root: The catalog root directory.
        path: Path of the document.

    Returns:
        The CatalogFile, or None if the document is not a resource.
    """
    relative = path.relative_to(root)
    parts = relative.parts

    if path.name in INDEX_FILES:
        # Nearest enclosing collection wins: domains/Sales/services/Orders -> service
        for i in range(len(parts) - 3, -1, -1):
            resource_type = COLLECTION_DIRS.get(parts[i])
            if resource_type is not None:
                return CatalogFile(
                    path=path,
                    relative_path=relative.as_posix(),
                    resource_type=resource_type,
                    resource_id=parts[i + 1],
                )
        return None

    if len(parts) >= 2:
        resource_type = COLLECTION_DIRS.get(parts[-2])
        if resource_type in FLAT_RESOURCE_TYPES:
            return CatalogFile(
                path=path,
                relative_path=relative.as_posix(),
                resource_type=resource_type,
                resource_id=path.stem,
            )

    return None


def scan_catalog(
    root: str | Path, ignore_patterns: Iterable[str] = ()
) -> list[CatalogFile]:
    """Find every resource document under a catalog root.

    Args:
        root: The catalog root directory.
        ignore_patterns: Glob patterns of relative paths to leave out.

    Returns:
        Discovered files, sorted by relative path.

    Raises:
        CatalogLoadError: If the root is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise CatalogLoadError(f"Not a directory: {root}", str(root))

    patterns = list(ignore_patterns)
    files: list[CatalogFile] = []

    for path in root.rglob("*"):
        if path.suffix not in DOCUMENT_SUFFIXES or not path.is_file():
            continue
        if SKIPPED_DIRS.intersection(path.relative_to(root).parts[:-1]):
            continue

        catalog_file = resolve_catalog_file(root, path)
        if catalog_file is None:
            continue
        if should_ignore_file(catalog_file.relative_path, patterns):
            log.debug("Ignoring %s", catalog_file.relative_path)
            continue
        files.append(catalog_file)

    files.sort(key=lambda f: f.relative_path)
    log.debug("Found %d catalog file(s) under %s", len(files), root)
    return files


def parse_frontmatter(text: str, path: str | None = None) -> tuple[dict, str]:
    """Split a document into its frontmatter mapping and body.

    Args:
        text: The raw document.
        path: Source path, used in error messages.

    Returns:
        A (frontmatter, content) tuple. Documents without a frontmatter
        block have an empty mapping.

    Raises:
        CatalogLoadError: If the frontmatter is not a valid YAML mapping.
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML frontmatter: {e}", path) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise CatalogLoadError(
            f"Expected YAML mapping in frontmatter, got {type(data).__name__}", path
        )

    return data, text[match.end():]


def parse_catalog_file(file: CatalogFile) -> ParsedResource:
    """Read and parse a single catalog document.

    Raises:
        CatalogLoadError: If the file cannot be read or parsed.
    """
    try:
        raw = file.path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(f"Cannot read file: {e}", file.relative_path) from e

    frontmatter, content = parse_frontmatter(raw, file.relative_path)
    return ParsedResource(file=file, frontmatter=frontmatter, content=content, raw=raw)


def parse_all_files(
    files: Iterable[CatalogFile],
) -> tuple[list[ParsedResource], list[ParseFailure]]:
    """Parse every file, collecting failures instead of stopping on them."""
    parsed: list[ParsedResource] = []
    failures: list[ParseFailure] = []

    for file in files:
        try:
            parsed.append(parse_catalog_file(file))
        except CatalogLoadError as e:
            log.debug("Failed to parse %s: %s", file.relative_path, e)
            failures.append(ParseFailure(file=file, message=str(e)))

    return parsed, failures
