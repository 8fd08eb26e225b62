"""Catalog loading exceptions."""


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or its frontmatter parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
