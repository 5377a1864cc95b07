"""Scene configuration.

``SceneConfig`` is an immutable value object built once at startup (by the
CLI or directly in code) and read by the layer registry and the driver.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from snowscape.layers import LAYER_REGISTRY
from snowscape.layers.snow import DEFAULT_SNOW_PROBABILITY
from snowscape.layers.tree import DEFAULT_CAPTION, DEFAULT_ORNAMENT_PROBABILITY
from snowscape.utils.style import COLOR_SYSTEM_CHOICES


DEFAULT_TICK_MS = 1000
DEFAULT_LAYERS: Tuple[str, ...] = ("tree", "snow")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SceneConfig:
    """Settings for one run of the scene.

    Attributes:
        tick_ms: Delay between frames in milliseconds.
        snow_probability: Per-column chance of a new flake each frame.
        ornament_probability: Per-leaf chance of an ornament each frame.
        caption: Text shown under the tree.
        layers: Layer registry names, front to back.
        seed: Base seed for every layer's generator; None for fresh entropy.
        color_system: ``"auto"``, ``"none"``, ``"standard"``, ``"256"`` or
            ``"truecolor"``.
        log_level: Root logging level name.
        log_file: Log file path; None logs to stderr.
    """

    tick_ms: int = DEFAULT_TICK_MS
    snow_probability: float = DEFAULT_SNOW_PROBABILITY
    ornament_probability: float = DEFAULT_ORNAMENT_PROBABILITY
    caption: str = DEFAULT_CAPTION
    layers: Tuple[str, ...] = DEFAULT_LAYERS
    seed: Optional[int] = None
    color_system: str = "auto"
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def validate(self) -> "SceneConfig":
        """Return ``self`` if every field is usable, else raise ``ValueError``."""
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        for name in ("snow_probability", "ornament_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if not self.layers:
            raise ValueError("At least one layer is required")
        unknown = [name for name in self.layers if name not in LAYER_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown layer(s): {', '.join(unknown)}")
        if not self.caption.isprintable():
            raise ValueError(f"Caption must be printable, got {self.caption!r}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must not be negative, got {self.seed}")
        if self.color_system not in COLOR_SYSTEM_CHOICES:
            raise ValueError(f"Unknown color system {self.color_system!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        return self
