"""Tests for catalog scanning and frontmatter parsing."""

import pytest

from catalog_lint.schema.errors import CatalogLoadError
from catalog_lint.schema.loader import (
    parse_all_files,
    parse_catalog_file,
    parse_frontmatter,
    scan_catalog,
)
from catalog_lint.schema.resources import ResourceType


class TestScanCatalog:
    def test_finds_resources(self, valid_catalog):
        files = scan_catalog(valid_catalog)

        found = [(f.resource_type, f.resource_id, f.relative_path) for f in files]
        assert found == [
            (ResourceType.COMMAND, "PlaceOrder", "commands/PlaceOrder/index.mdx"),
            (ResourceType.DOMAIN, "Sales", "domains/Sales/index.mdx"),
            (ResourceType.SERVICE, "OrdersService", "domains/Sales/services/OrdersService/index.mdx"),
            (ResourceType.EVENT, "OrderPlaced", "events/OrderPlaced/index.mdx"),
            (ResourceType.EVENT, "OrderPlaced", "events/OrderPlaced/versioned/1.0.0/index.mdx"),
            (ResourceType.TEAM, "platform", "teams/platform.mdx"),
            (ResourceType.USER, "aSmith", "users/aSmith.mdx"),
        ]

    def test_skips_non_resource_documents(self, write_catalog):
        root = write_catalog(
            {
                "README.md": "# Catalog",
                "events/OrderPlaced/index.md": "---\nid: OrderPlaced\n---\n",
                "events/OrderPlaced/changelog.mdx": "changes",
                "events/OrderPlaced/schema.json": "{}",
                "pages/homepage.mdx": "home",
                "node_modules/pkg/events/Other/index.mdx": "---\nid: Other\n---\n",
            }
        )

        files = scan_catalog(root)

        assert [f.relative_path for f in files] == ["events/OrderPlaced/index.md"]

    def test_nested_message_under_service(self, write_catalog):
        root = write_catalog({"services/Orders/events/OrderPlaced/index.mdx": "---\n---\n"})

        files = scan_catalog(root)

        assert files[0].resource_type == ResourceType.EVENT
        assert files[0].resource_id == "OrderPlaced"

    def test_ignore_patterns(self, valid_catalog, write_catalog):
        write_catalog({"events/archived/OldEvent/index.mdx": "---\nid: OldEvent\n---\n"})

        files = scan_catalog(valid_catalog, ["**/archived/**"])

        assert all("archived" not in f.relative_path for f in files)
        assert len(files) == 7

    def test_not_a_directory(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            scan_catalog(tmp_path / "missing")
        assert "Not a directory" in str(exc_info.value)


class TestParseFrontmatter:
    def test_frontmatter_and_content(self):
        data, content = parse_frontmatter("---\nid: a\nversion: 1.0.0\n---\n\n# Body\n")

        assert data == {"id": "a", "version": "1.0.0"}
        assert content == "\n# Body\n"

    def test_no_frontmatter(self):
        data, content = parse_frontmatter("# Just a body\n")

        assert data == {}
        assert content == "# Just a body\n"

    def test_empty_frontmatter(self):
        data, _ = parse_frontmatter("---\n\n---\n")
        assert data == {}

    def test_invalid_yaml(self):
        with pytest.raises(CatalogLoadError) as exc_info:
            parse_frontmatter("---\nkey: [unclosed\n---\n", "events/a/index.mdx")
        assert "Invalid YAML" in str(exc_info.value)
        assert exc_info.value.path == "events/a/index.mdx"

    def test_non_mapping(self):
        with pytest.raises(CatalogLoadError) as exc_info:
            parse_frontmatter("---\n- a\n- b\n---\n")
        assert "mapping" in str(exc_info.value).lower()


class TestParseFiles:
    def test_parse_catalog_file(self, valid_catalog):
        files = scan_catalog(valid_catalog)
        user = next(f for f in files if f.resource_type == ResourceType.USER)

        parsed = parse_catalog_file(user)

        assert parsed.frontmatter["id"] == "asmith"
        assert parsed.resource_key == "user/aSmith"
        assert parsed.raw.startswith("---")

    def test_failures_are_collected(self, write_catalog):
        root = write_catalog(
            {
                "events/Good/index.mdx": "---\nid: Good\n---\n",
                "events/Bad/index.mdx": "---\nid: [oops\n---\n",
            }
        )

        parsed, failures = parse_all_files(scan_catalog(root))

        assert [p.resource_id for p in parsed] == ["Good"]
        assert len(failures) == 1
        assert failures[0].file.resource_id == "Bad"
        assert "Invalid YAML" in failures[0].message
