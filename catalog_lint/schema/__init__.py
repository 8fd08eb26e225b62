"""Schema layer: resource types, frontmatter models and catalog loading."""

from .errors import CatalogLoadError
from .resources import (
    COLLECTION_DIRS,
    CatalogFile,
    ParsedResource,
    ResourceReference,
    ResourceType,
)
from .models import SCHEMAS
from .loader import (
    ParseFailure,
    parse_all_files,
    parse_catalog_file,
    parse_frontmatter,
    scan_catalog,
)

__all__ = [
    "CatalogLoadError",
    "COLLECTION_DIRS",
    "CatalogFile",
    "ParsedResource",
    "ResourceReference",
    "ResourceType",
    "SCHEMAS",
    "ParseFailure",
    "parse_all_files",
    "parse_catalog_file",
    "parse_frontmatter",
    "scan_catalog",
]
