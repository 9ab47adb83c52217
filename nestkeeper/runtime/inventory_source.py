"""Load inventory records for command-line matching."""

from __future__ import annotations

from pathlib import Path

from nestkeeper.domain.inventory import InventoryItem
from nestkeeper.runtime.logging import get_logger

logger = get_logger(__name__)


def load_inventory_items(path: Path) -> list[InventoryItem]:
    """
    Load inventory items from a TOML file, preserving file order.

    Expected layout::

        [[items]]
        id = "1"
        name = "Refrigerator"

    Entries without a name are skipped; a missing id falls back to the
    entry's 1-based position.
    """
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)

    items: list[InventoryItem] = []
    for position, entry in enumerate(data.get("items", []), start=1):
        name = str(entry.get("name", "")).strip()
        if not name:
            logger.warning("Skipping inventory entry %d in %s: no name", position, path)
            continue
        items.append(InventoryItem(id=str(entry.get("id", position)), name=name))
    return items
