"""
Profile loading with a fallback chain.

Sources are tried in order: the symbol's own profile, then the market
default profile, then a synthetic flat profile. Any load error moves on to
the next step; the synthetic step cannot fail, so loading always yields a
fully validated profile.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Union

from volprofile.config.defaults import get_default_config
from volprofile.config.loader import ConfigLoader
from volprofile.config.validation import ConfigValidator
from volprofile.data.parsers import ProfileBuilder
from volprofile.data.sources import DEFAULT_HEADER, CsvRowSource
from volprofile.data.validators import BucketValidator
from volprofile.errors import ProfileLoadError
from volprofile.logging.config import get_loader_logger, log_source_failure

from .synthetic import generate_flat_profile
from .volume_profile import VolumeProfile

logger = get_loader_logger(__name__)

PathLike = Union[str, Path]


def _checked_config(config: dict[str, Any]) -> dict[str, Any]:
    """Merge each section over its defaults, replacing invalid sections with the defaults."""
    defaults = asdict(get_default_config())
    checked = dict(config)
    for section, section_defaults in defaults.items():
        if section not in config:
            continue
        given = config[section]
        checked[section] = {**section_defaults, **given} if isinstance(given, dict) else given

    for section, errors in ConfigValidator.validate_sections(checked).items():
        if not errors:
            continue
        for error in errors:
            logger.warning(
                "Invalid configuration, using defaults",
                section=section,
                field=error.field,
                reason=error.message,
                value=error.value,
            )
        checked[section] = defaults[section]
    return checked


class ProfileLoader:
    """Loads a volume profile through the primary → default → synthetic chain."""

    def __init__(self, config: Optional[dict[str, Any]] = None,
                 profile_dir: Optional[PathLike] = None,
                 market: Optional[str] = None) -> None:
        """
        Initialize loader.

        Args:
            config: Merged configuration (all sections optional)
            profile_dir: Directory holding ``<symbol>.csv`` and ``<market>.csv`` files
            market: Market whose default profile backs up symbol profiles
        """
        self.config = _checked_config(config or {})
        self.format_config = self.config.get("format", {})
        self.session_config = self.config.get("session", {})
        self.source_config = self.config.get("source", {})
        self.profile_dir = Path(profile_dir or self.source_config.get("profile_dir", "profiles"))
        self.market = market or self.source_config.get("default_market", "HK")

        self.builder = ProfileBuilder(
            config=self.format_config,
            validator=BucketValidator(self.config.get("validation")),
        )

    @classmethod
    def create(cls, market: Optional[str] = None, config_dir: Optional[Path] = None,
               overrides: Optional[dict[str, Any]] = None) -> "ProfileLoader":
        """Create a loader from layered configuration for a market."""
        config_loader = ConfigLoader.create(config_dir)
        market = market or config_loader.defaults.source.default_market
        config = config_loader.merge_config(market, overrides)
        return cls(config=config, profile_dir=config_loader.resolve_profile_dir(config), market=market)

    def symbol_path(self, symbol: str) -> Path:
        return self.profile_dir / f"{symbol}.csv"

    def market_path(self, market: Optional[str] = None) -> Path:
        return self.profile_dir / f"{market or self.market}.csv"

    def load(self, symbol: Optional[str] = None, market: Optional[str] = None) -> VolumeProfile:
        """
        Load the profile for a symbol, falling back to the market default.

        Args:
            symbol: Instrument whose own profile is tried first
            market: Market whose default profile is tried second

        Returns:
            Validated profile from the first source that loads, or a flat profile
        """
        primary = self.symbol_path(symbol) if symbol else None
        return self.load_with_fallback(primary, self.market_path(market))

    def load_with_fallback(self, primary_path: Optional[PathLike],
                           default_path: Optional[PathLike]) -> VolumeProfile:
        """Run the fallback chain over explicit paths."""
        for origin, path in (("primary", primary_path), ("default", default_path)):
            if path is None:
                continue
            try:
                profile = self.load_file(path, origin=origin)
            except ProfileLoadError as e:
                log_source_failure(logger, origin, str(path), e)
                continue

            logger.info(
                "Volume profile loaded",
                origin=origin,
                path=str(path),
                bucket_count=len(profile),
            )
            return profile

        logger.info("Generating flat profile", reason="no loadable profile source")
        return generate_flat_profile(self.session_config)

    def load_file(self, path: PathLike, origin: str = "primary") -> VolumeProfile:
        """
        Load and validate a single profile file, without fallback.

        Raises:
            SourceNotFoundError: If the file does not exist
            FormatError: If the header or a row is malformed
            ValidationError: If the buckets violate profile invariants
        """
        source = CsvRowSource(path, header=self.format_config.get("header", DEFAULT_HEADER))
        return self.builder.build(source.read_rows(), origin=origin, source_path=str(path))


def load_volume_profile(primary_path: Optional[PathLike], default_path: Optional[PathLike],
                        config: Optional[dict[str, Any]] = None) -> VolumeProfile:
    """Load a profile from explicit paths with the standard fallback chain."""
    return ProfileLoader(config).load_with_fallback(primary_path, default_path)
