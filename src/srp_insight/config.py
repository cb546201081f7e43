"""Configuration loading and management for SRP Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalyzerConfig)
    2. Global config (~/.srp-insight.toml)
    3. Project config (./srp-insight.toml)
    4. Explicit config file
    5. Environment variables (SRP_INSIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(filter_framework_types=False)
    >>> config.filter_framework_types
    False
"""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigFileError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Cycled by discovery index; the ninth dependency reuses the first color.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#3b82f6",  # blue
    "#10b981",  # green
    "#8b5cf6",  # purple
    "#ef4444",  # red
    "#06b6d4",  # cyan
    "#ec4899",  # pink
    "#14b8a6",  # teal
    "#f97316",  # orange
)

# Cross-cutting framework services hidden when filtering is enabled.
DEFAULT_FRAMEWORK_TYPES: tuple[str, ...] = (
    "ILogger",
    "IOptions",
    "IConfiguration",
    "IMemoryCache",
    "IDistributedCache",
    "IHostEnvironment",
    "IWebHostEnvironment",
    "IHttpContextAccessor",
    "IServiceProvider",
    "IHostApplicationLifetime",
)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuration for analysis and highlighting.

    Attributes:
        filter_framework_types: Hide framework services from the dependency list
        framework_types: Base type names treated as framework services
        palette: Colors assigned to dependencies in discovery order
        max_source_chars: Largest source text ``analyze`` accepts
        unselected_opacity: Highlight opacity when no dependency is selected
        verbosity: Logging verbosity level
    """

    filter_framework_types: bool = True
    framework_types: tuple[str, ...] = field(default=DEFAULT_FRAMEWORK_TYPES)
    palette: tuple[str, ...] = field(default=DEFAULT_PALETTE)
    max_source_chars: int = 1_000_000
    unselected_opacity: float = 0.85
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML arrays arrive as lists
        object.__setattr__(self, "framework_types", tuple(self.framework_types))
        object.__setattr__(self, "palette", tuple(self.palette))

        if not self.palette:
            raise InvalidConfigError("palette", self.palette, "must contain at least one color")
        for color in self.palette:
            if not isinstance(color, str) or not _HEX_COLOR.match(color):
                raise InvalidConfigError("palette", color, "colors must look like #rrggbb")
        if self.max_source_chars < 1:
            raise InvalidConfigError("max_source_chars", self.max_source_chars, "must be at least 1")
        if not 0.0 < self.unselected_opacity <= 1.0:
            raise InvalidConfigError(
                "unselected_opacity", self.unselected_opacity, "must be in (0.0, 1.0]"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


DEFAULT_CONFIG = AnalyzerConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalyzerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated AnalyzerConfig instance

    Raises:
        ConfigFileError: If a config file is missing or unreadable
        InvalidConfigError: If a value or key is invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".srp-insight.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "srp-insight.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(AnalyzerConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    return AnalyzerConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load scalar settings from SRP_INSIGHT_* environment variables.

    Supported environment variables:
        SRP_INSIGHT_FILTER_FRAMEWORK_TYPES: bool (true/false/1/0)
        SRP_INSIGHT_MAX_SOURCE_CHARS: int
        SRP_INSIGHT_UNSELECTED_OPACITY: float
        SRP_INSIGHT_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(AnalyzerConfig)
    result: dict[str, Any] = {}

    for field_name in AnalyzerConfig.__dataclass_fields__:
        env_key = f"SRP_INSIGHT_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Tuple fields (palette, framework_types) are not settable from the
    environment and return None.
    """
    origin = getattr(type_hint, "__origin__", None)
    if origin is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting either top-level keys or an [srp-insight] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e))

    section = data.get("srp-insight")
    if isinstance(section, dict):
        return section
    return data
