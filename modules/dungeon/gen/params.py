"""User-facing parameters for procedural dungeon generation."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Mapping

from modules.dungeon.errors import ConfigError
from modules.dungeon.geometry import Size


@dataclass(frozen=True, slots=True)
class SizeRange:
    """Inclusive ``(width, height)`` range; reversed bounds are swapped per axis."""

    minimum: Size
    maximum: Size

    def __post_init__(self) -> None:
        (min_w, min_h), (max_w, max_h) = self.minimum, self.maximum
        object.__setattr__(self, "minimum", (min(min_w, max_w), min(min_h, max_h)))
        object.__setattr__(self, "maximum", (max(min_w, max_w), max(min_h, max_h)))

    @property
    def max_height(self) -> int:
        return self.maximum[1]

    @classmethod
    def fixed(cls, size: Size) -> "SizeRange":
        return cls(tuple(size), tuple(size))

    @classmethod
    def from_value(cls, value: Any) -> "SizeRange":
        if isinstance(value, SizeRange):
            return value
        if isinstance(value, Mapping):
            return cls(tuple(value["min"]), tuple(value["max"]))
        minimum, maximum = value
        return cls(tuple(minimum), tuple(maximum))


@dataclass(frozen=True, slots=True)
class CountClamp:
    """``[minimum, maximum]`` bound on a decoration count.

    Only the minimum is enforced by the scatter helpers; the maximum is advisory.
    """

    minimum: int
    maximum: int

    @classmethod
    def from_value(cls, value: Any) -> "CountClamp":
        if isinstance(value, CountClamp):
            return value
        if isinstance(value, Mapping):
            return cls(int(value["min"]), int(value["max"]))
        minimum, maximum = value
        return cls(int(minimum), int(maximum))


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Configuration bundle for one dungeon generation call."""

    #: Smallest width/height leaving room for the wall ring and a 2-cell margin.
    MIN_RECT_SIZE: ClassVar[int] = 6
    #: Height jitter applied to the corridors leading into the boss and exit rooms.
    CORRIDOR_HEIGHT_JITTER: ClassVar[int] = 2
    DEFAULT_SEED: ClassVar[int] = 20250820

    room_size: SizeRange = SizeRange((18, 12), (26, 18))
    boss_size: SizeRange = SizeRange((28, 20), (36, 26))
    corridor_size: SizeRange = SizeRange((8, 10), (8, 10))
    vertical_step: int = 28

    torch_wall_chance: float = 0.18
    torch_corridor_chance: float = 0.22
    rune_chance: float = 0.08
    decal_chance: float = 0.06
    extra_statue_chance: float = 0.35

    torches: CountClamp = CountClamp(2, 8)
    runes: CountClamp = CountClamp(2, 12)
    decals: CountClamp = CountClamp(1, 10)

    corridor_torch_multipliers: tuple[float, ...] = (1.0, 0.8, 1.2, 0.6)

    def __post_init__(self) -> None:
        object.__setattr__(self, "room_size", SizeRange.from_value(self.room_size))
        object.__setattr__(self, "boss_size", SizeRange.from_value(self.boss_size))
        object.__setattr__(self, "corridor_size", SizeRange.from_value(self.corridor_size))
        object.__setattr__(self, "torches", CountClamp.from_value(self.torches))
        object.__setattr__(self, "runes", CountClamp.from_value(self.runes))
        object.__setattr__(self, "decals", CountClamp.from_value(self.decals))
        object.__setattr__(
            self,
            "corridor_torch_multipliers",
            tuple(float(value) for value in self.corridor_torch_multipliers),
        )

        for name, size_range in (
            ("room_size", self.room_size),
            ("boss_size", self.boss_size),
            ("corridor_size", self.corridor_size),
        ):
            width, height = size_range.minimum
            if width < self.MIN_RECT_SIZE or height < self.MIN_RECT_SIZE:
                raise ConfigError(
                    f"{name} minimum {size_range.minimum} is below {self.MIN_RECT_SIZE}x{self.MIN_RECT_SIZE}"
                )
        # Jittered corridors must stay viable as well.
        if self.corridor_size.minimum[1] - self.CORRIDOR_HEIGHT_JITTER < self.MIN_RECT_SIZE:
            raise ConfigError(
                f"corridor_size minimum height must be at least "
                f"{self.MIN_RECT_SIZE + self.CORRIDOR_HEIGHT_JITTER} to allow height jitter"
            )

        for name in (
            "torch_wall_chance",
            "torch_corridor_chance",
            "rune_chance",
            "decal_chance",
            "extra_statue_chance",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must lie between 0 and 1")

        for name, clamp in (("torches", self.torches), ("runes", self.runes), ("decals", self.decals)):
            if clamp.minimum < 0 or clamp.maximum < 0:
                raise ConfigError(f"{name} clamp must not be negative")

        if len(self.corridor_torch_multipliers) != 4:
            raise ConfigError("corridor_torch_multipliers needs one value per corridor (4)")
        if any(value < 0 for value in self.corridor_torch_multipliers):
            raise ConfigError("corridor_torch_multipliers must not be negative")

        if self.vertical_step <= 0:
            raise ConfigError("vertical_step must be positive")
        if self.vertical_step < self.tallest_stage_height:
            raise ConfigError(
                f"vertical_step {self.vertical_step} is smaller than the tallest stage "
                f"height {self.tallest_stage_height}; stages would overlap"
            )

    @property
    def tallest_stage_height(self) -> int:
        """Return the tallest height any stage can be sampled with."""

        return max(
            self.room_size.max_height,
            self.boss_size.max_height,
            self.corridor_size.max_height + self.CORRIDOR_HEIGHT_JITTER,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "GenerationConfig":
        """Build a config from plain (e.g. YAML-loaded) data; unknown keys are rejected."""

        if not data:
            return cls()
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown generation settings: {', '.join(unknown)}")
        try:
            return cls(**dict(data))
        except ConfigError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"malformed generation settings: {exc}") from exc


__all__ = ["CountClamp", "GenerationConfig", "Size", "SizeRange"]
