import logging
import math
from dataclasses import dataclass

logging.basicConfig(format="%(levelname)s: %(message)s")
my_logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


class RenderError(RuntimeError):
    pass


def _check_positive(name, value):
    # written so that nan fails too
    if not value > 0:
        raise ConfigError(f"{name} must be positive, got {value}")


def _check_range(axis, low, high):
    if not (math.isfinite(low) and math.isfinite(high)):
        raise ConfigError(f"{axis} range must be finite, got [{low}, {high}]")
    if high <= low:
        raise ConfigError(f"{axis} max must be greater than {axis} min, got [{low}, {high}]")


@dataclass(frozen=True)
class Viewport:
    r_min: float
    r_max: float
    i_min: float
    i_max: float
    image_width: int
    image_height: int

    def __post_init__(self):
        _check_positive("image width", self.image_width)
        _check_positive("image height", self.image_height)
        _check_range("real", self.r_min, self.r_max)
        _check_range("imaginary", self.i_min, self.i_max)

    @classmethod
    def from_center(cls, r_min: float, r_max: float, i_center: float, image_width: int, image_height: int):
        """
        Build a viewport whose imaginary range is centred on `i_center` and
        sized so that pixels are square.
        """
        _check_positive("image width", image_width)
        _check_positive("image height", image_height)
        i_width = (r_max - r_min) * image_height / image_width
        i_min = i_center - i_width / 2
        return cls(r_min, r_max, i_min, i_min + i_width, image_width, image_height)

    def get_width_per_pix(self) -> float:
        return (self.r_max - self.r_min) / self.image_width

    def get_height_per_pix(self) -> float:
        return (self.i_max - self.i_min) / self.image_height

    def get_center(self):
        return (self.r_min + self.r_max) / 2, (self.i_min + self.i_max) / 2

    def get_point_by_coords(self, x: int, y: int):
        # must stay the same expression as in worker.compute_rows
        return (
            x * self.get_width_per_pix() + self.r_min,
            y * self.get_height_per_pix() + self.i_min,
        )


@dataclass(frozen=True)
class IterationBudget:
    max_iterations: int
    colour_factor: float

    def __post_init__(self):
        _check_positive("max iterations", self.max_iterations)
        _check_positive("colour factor", self.colour_factor)
        if not math.isfinite(self.colour_factor):
            raise ConfigError(f"colour factor must be finite, got {self.colour_factor}")


@dataclass(frozen=True)
class MandelbrotConfig:
    viewport: Viewport
    budget: IterationBudget
    threads: int
    drop_remainder: bool = False

    def __post_init__(self):
        _check_positive("thread count", self.threads)

    @property
    def image_width(self):
        return self.viewport.image_width

    @property
    def image_height(self):
        return self.viewport.image_height

    @property
    def max_iterations(self):
        return self.budget.max_iterations
