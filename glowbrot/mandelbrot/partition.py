from dataclasses import dataclass
from typing import List, Tuple

from glowbrot.utils.mandelbrot_utils import ConfigError


@dataclass(frozen=True)
class WorkAssignment:
    worker_index: int
    rows: Tuple[int, ...]


def partition_rows(height: int, threads: int, drop_remainder: bool = False) -> List[WorkAssignment]:
    """
    Interleave rows across workers: worker k owns rows k, k + threads, k + 2 * threads, ...

    With `drop_remainder` every worker gets exactly `height // threads` rows and the last
    `height % threads` rows belong to nobody.
    """
    if height <= 0:
        raise ConfigError(f"height must be positive, got {height}")
    if threads <= 0:
        raise ConfigError(f"thread count must be positive, got {threads}")

    stop = (height // threads) * threads if drop_remainder else height
    return [WorkAssignment(k, tuple(range(k, stop, threads))) for k in range(threads)]


def owner_of(y: int, threads: int) -> Tuple[int, int]:
    # (worker index, line number within that worker's output)
    return y % threads, y // threads
