"""Runtime loader for user-supplied known retailer keywords."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from nestkeeper.runtime.paths import get_paths


@lru_cache(maxsize=4)
def load_known_retailer_keywords(config_path: str | None = None) -> tuple[str, ...]:
    """Flatten every `[[retailers]] keywords` list in retailers.toml; missing file gives ()."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    path = Path(config_path) if config_path is not None else get_paths().retailer_rules
    if not path.exists():
        return ()

    with open(path, "rb") as f:
        config = tomllib.load(f)

    return tuple(str(keyword) for rule in config.get("retailers", []) for keyword in rule.get("keywords", []))
