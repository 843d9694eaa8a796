"""Default configuration parameters for volume profile loading and validation."""

from dataclasses import dataclass, field


def _default_category_minutes() -> dict[str, int]:
    return {"POS": 30, "CTS": 330, "L": 60, "CAS": 10}


@dataclass(frozen=True)
class FormatParams:
    """Profile file format parameters."""
    time_format: str = "%H:%M"                        # Bucket boundary format
    header: str = "start,end,percentage,type"         # Required first line


@dataclass(frozen=True)
class ValidationParams:
    """Profile invariant parameters."""
    share_tolerance: float = 1e-4                     # Max |total share - 1.0|
    share_warning_threshold: float = 0.3              # Warn above this bucket share
    category_minutes: dict[str, int] = field(default_factory=_default_category_minutes)


@dataclass(frozen=True)
class SessionParams:
    """Trading calendar used for the synthetic flat profile."""
    pre_open_start: str = "09:00"
    morning_start: str = "09:30"
    lunch_start: str = "12:00"
    afternoon_start: str = "13:00"
    close_auction_start: str = "16:00"
    close_auction_end: str = "16:10"


@dataclass(frozen=True)
class SourceParams:
    """Profile source locations."""
    profile_dir: str = "profiles"                     # Relative to project root
    default_market: str = "HK"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    format: FormatParams
    validation: ValidationParams
    session: SessionParams
    source: SourceParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        format=FormatParams(),
        validation=ValidationParams(),
        session=SessionParams(),
        source=SourceParams(),
    )
