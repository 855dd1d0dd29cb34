from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in self.rgba():
            assert 0 <= channel <= 255, (
                f"Expected all color channels to be between 0 and 255. Found {self.rgba()}"
            )

    @staticmethod
    def white() -> "Color":
        return Color(r=255, g=255, b=255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)."""
        digits = value.strip().removeprefix("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected a 6 or 8 digit hex color, got {value!r}")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as exc:
            raise ValueError(f"Invalid hex color {value!r}") from exc
        return cls(*channels)

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[int]:
        return iter(self.rgba())

    def with_alpha(self, fraction: float) -> "Color":
        """Return this color with its alpha channel replaced by ``fraction``."""
        return Color(r=self.r, g=self.g, b=self.b, a=self.__clamp_channel(fraction * 255.0))

    @staticmethod
    def __clamp_channel(value: float) -> int:
        return min(255, max(0, int(round(value))))
