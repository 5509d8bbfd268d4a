import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from glowbrot.mandelbrot.assembler import assemble
from glowbrot.mandelbrot.partition import partition_rows
from glowbrot.mandelbrot.worker import compute_assignment
from glowbrot.utils.mandelbrot_utils import MandelbrotConfig, RenderError, my_logger


def mandelbrot(config: MandelbrotConfig) -> np.ndarray:
    """
    Render `config` into a read-only (height, width, 3) uint8 buffer.

    Spawns one thread per worker, waits for all of them and only then assembles the image.
    Any worker failure aborts the render with a RenderError.
    """
    viewport = config.viewport
    assignments = partition_rows(viewport.image_height, config.threads, config.drop_remainder)
    center_real, center_imag = viewport.get_center()
    my_logger.debug(
        f"rendering {config.image_width}x{config.image_height} around {center_real} {center_imag:+}j, "
        f"{config.max_iterations} iterations, {config.threads} threads, "
        f"{max(len(a.rows) for a in assignments)} rows per thread"
    )

    # computed once so every worker maps pixels identically
    r_step = viewport.get_width_per_pix()
    i_step = viewport.get_height_per_pix()

    start = time.time()
    results = [None] * config.threads
    with ThreadPoolExecutor(max_workers=config.threads, thread_name_prefix="mandelbrot-rows") as executor:
        futures = {
            executor.submit(compute_assignment, assignment, config, r_step, i_step): assignment.worker_index
            for assignment in assignments
        }
        for future, worker_index in futures.items():
            try:
                results[worker_index] = future.result()
            except Exception as e:
                raise RenderError(f"worker {worker_index} failed") from e
            my_logger.debug(f"worker {worker_index} finished {results[worker_index].shape[0]} rows")

    pixels = assemble(results, viewport.image_height, viewport.image_width, config.threads)
    my_logger.info("computation took {} seconds".format(round(time.time() - start, 2)))
    return pixels
