"""catalog-lint: frontmatter and reference linter for event-driven architecture catalogs."""

__version__ = "0.1.0"
