"""Configuration loading and management for xorheat.

Configuration sources are merged in priority order:
    1. Defaults (defined in VizConfig)
    2. Global config (~/.xorheat.toml)
    3. Project config (./xorheat.toml)
    4. Explicit config file
    5. Environment variables (XORHEAT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(depth=5, verbose=True)
    >>> config.depth
    5
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, XorHeatError
from .heatmap.scene import SceneOptions, Viewport
from .state import clamp_radius
from .tree.models import MAX_DEPTH, MIN_DEPTH, clamp_depth

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "XORHEAT_"
CONFIG_FILENAME = "xorheat.toml"


@dataclass(frozen=True)
class VizConfig:
    """Settings for a visualisation session.

    Attributes:
        Session start:
            depth: Initial tree depth (1-16)
            radius: Initial in-radius exponent; leaves within 2**radius - 1
                of the selection are highlighted

        Viewport:
            width: Drawing width in pixels
            height: Drawing height in pixels
            ring_fraction: Leaf ring radius as a fraction of half the short side

        Bands:
            arc_width: Width of the heat band beyond the node ring
            node_width: Half-width of the node band around the leaf ring
            heat_inner_radius: Inner radius of the heat sectors

        Server:
            host: Interface the live viewer binds to
            port: Port the live viewer listens on

        Output control:
            verbosity: Logging verbosity level
    """

    depth: int = 1
    radius: int = 0

    width: float = 800.0
    height: float = 800.0
    ring_fraction: float = 0.75

    arc_width: float = 20.0
    node_width: float = 16.0
    heat_inner_radius: float = 16.0

    host: str = "127.0.0.1"
    port: int = 8765

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(f"depth must be between {MIN_DEPTH} and {MAX_DEPTH}")
        if not 0 <= self.radius <= MAX_DEPTH:
            raise ValueError(f"radius must be between 0 and {MAX_DEPTH}")

        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if not 0.0 < self.ring_fraction <= 1.0:
            raise ValueError("ring_fraction must be in (0.0, 1.0]")

        if self.arc_width < 0 or self.node_width < 0 or self.heat_inner_radius < 0:
            raise ValueError("band sizes must be non-negative")

        if not 0 < self.port < 65536:
            raise ValueError("port must be between 1 and 65535")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.width, self.height)

    @property
    def scene_options(self) -> SceneOptions:
        return SceneOptions(
            ring_fraction=self.ring_fraction,
            arc_width=self.arc_width,
            node_width=self.node_width,
            heat_inner_radius=self.heat_inner_radius,
        )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> VizConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored

    Returns:
        Validated VizConfig instance

    Raises:
        XorHeatError: If a config file is missing or unreadable
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise XorHeatError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    # Verbosity flags map onto the single verbosity field
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({key: value for key, value in overrides.items() if value is not None})
    _clamp_levels(merged)

    try:
        return VizConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise XorHeatError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _clamp_levels(merged: dict[str, Any]) -> None:
    """Clamp user-entered depth and radius into range, as the state machine does."""
    for key, clamp in (("depth", clamp_depth), ("radius", clamp_radius)):
        value = merged.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            merged[key] = clamp(value)


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except XorHeatError:
        raise
    except Exception as e:
        raise XorHeatError(f"Invalid {label} config '{path}': {e}")
    # Settings may live at top level or under [xorheat]
    section = data.get("xorheat", data)
    if not isinstance(section, dict):
        raise XorHeatError(f"Invalid {label} config '{path}': [xorheat] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from XORHEAT_* environment variables.

    Supported environment variables:
        XORHEAT_DEPTH: int
        XORHEAT_RADIUS: int
        XORHEAT_WIDTH / XORHEAT_HEIGHT: float
        XORHEAT_RING_FRACTION: float
        XORHEAT_ARC_WIDTH / XORHEAT_NODE_WIDTH / XORHEAT_HEAT_INNER_RADIUS: float
        XORHEAT_HOST: str
        XORHEAT_PORT: int
        XORHEAT_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(VizConfig)
    result: dict[str, Any] = {}

    for field_name in VizConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment string into the field's type.

    Raises:
        ValueError: If the value can't be parsed
    """
    origin = getattr(type_hint, "__origin__", None)

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

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        XorHeatError: If no TOML parser is available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise XorHeatError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
