"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from catalog_lint.schema.resources import CatalogFile, ParsedResource, ResourceType


def make_resource(
    resource_type: str,
    resource_id: str,
    frontmatter: dict | None = None,
    relative_path: str | None = None,
) -> ParsedResource:
    """Build a ParsedResource as the loader would for a catalog file."""
    resource_type = ResourceType(resource_type)
    if relative_path is None:
        relative_path = f"{resource_type.value}s/{resource_id}/index.mdx"
    file = CatalogFile(
        path=Path("/catalog") / relative_path,
        relative_path=relative_path,
        resource_type=resource_type,
        resource_id=resource_id,
    )
    return ParsedResource(file=file, frontmatter=frontmatter or {})


@pytest.fixture
def resource():
    """Return the make_resource factory."""
    return make_resource


@pytest.fixture
def write_catalog(tmp_path):
    """Return a helper that writes {relative path: text} into a catalog dir."""

    def _write(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def valid_catalog_files() -> dict[str, str]:
    """Return a small catalog with every reference resolving."""
    return {
        "domains/Sales/index.mdx": """---
id: Sales
name: Sales
version: 1.0.0
summary: Everything to do with selling
owners:
  - asmith
services:
  - id: OrdersService
---

# Sales
""",
        "domains/Sales/services/OrdersService/index.mdx": """---
id: OrdersService
name: Orders Service
version: 1.2.0
summary: Takes orders
owners:
  - platform
sends:
  - id: OrderPlaced
    version: ^1.0.0
receives:
  - id: PlaceOrder
---
""",
        "events/OrderPlaced/index.mdx": """---
id: OrderPlaced
name: Order Placed
version: 1.1.0
summary: An order was placed
owners:
  - platform
---
""",
        "events/OrderPlaced/versioned/1.0.0/index.mdx": """---
id: OrderPlaced
name: Order Placed
version: 1.0.0
summary: An order was placed
owners:
  - platform
---
""",
        "commands/PlaceOrder/index.mdx": """---
id: PlaceOrder
name: Place Order
version: 0.0.1
summary: Ask for an order to be placed
owners:
  - asmith
---
""",
        "users/aSmith.mdx": """---
id: asmith
name: Alice Smith
email: alice@example.com
---
""",
        "teams/platform.mdx": """---
id: platform
name: Platform
members:
  - asmith
---
""",
    }


@pytest.fixture
def valid_catalog(write_catalog, valid_catalog_files) -> Path:
    """Return the path of a catalog with no problems."""
    return write_catalog(valid_catalog_files)
