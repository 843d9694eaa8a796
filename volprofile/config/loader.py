"""Layered configuration: defaults, then per-market YAML, then caller overrides."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class ConfigLoader:
    """Loads market configuration from ``markets.yaml`` over the built-in defaults."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a loader reading from ``config_dir`` (the project's ``config/`` by default)."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_market_config(self, market: str) -> dict[str, Any]:
        """Return the ``markets.<market>`` section of ``markets.yaml``, or an empty dict."""
        markets_file = self.config_dir / "markets.yaml"

        if not markets_file.exists():
            return {}

        with open(markets_file, encoding="utf-8") as f:
            markets = (yaml.safe_load(f) or {}).get("markets") or {}

        return markets.get(market) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        market: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """Build the merged config for a market; caller overrides win over the market file."""
        config = _deep_merge(asdict(self.defaults), self.load_market_config(market))
        return _deep_merge(config, overrides or {})

    def resolve_profile_dir(self, config: dict[str, Any]) -> Path:
        """Resolve the profile directory, relative paths against the project root."""
        profile_dir = Path(config["source"]["profile_dir"])
        if profile_dir.is_absolute():
            return profile_dir
        return self.config_dir.parent / profile_dir
