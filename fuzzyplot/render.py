"""Render scheduling: split the image into row bands and render them in parallel.

Each band is a numpy block of pixel coordinates that goes through the whole
pipeline at once: pixel -> graph point -> polar branches -> metrics ->
compositor. Bands are rendered on a thread pool and copied into the image
buffer by the collecting thread, so every pixel is written exactly once.
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np
from PIL import Image
from tqdm import tqdm

from ._common import CHUNK_ROWS, WORKERS, ArgumentError, RenderError
from .branches import make_contexts
from .compose import OVERLAY_MASK, apply_mask, blank_canvas
from .geometry import pixel_to_image_point
from .metrics import overlay_intensity, plot_intensity


def row_chunks(height, chunk_rows=CHUNK_ROWS):
    """Contiguous (start, stop) row ranges covering every row once."""
    return [(start, min(start + chunk_rows, height)) for start in range(0, height, chunk_rows)]


def graph_points(rows, params):
    """Graph-space coordinates of every pixel in a band of rows."""
    start, stop = rows
    py, px = np.mgrid[start:stop, 0 : params.width].astype(np.float64)
    image_point = pixel_to_image_point(px, py, params.height)
    return params.image_rect.map_point(image_point, params.graph_rect)


def render_block(rows, plots, params):
    """Colours for the pixels in ``rows``, as a (rows, width, 3) uint8 array."""
    start, stop = rows
    point = graph_points(rows, params)
    shape = (stop - start, params.width)

    pixels = blank_canvas(*shape)
    apply_mask(pixels, overlay_intensity(point, params), OVERLAY_MASK)

    contexts = make_contexts(point, params.theta_range)
    for plot in plots:
        apply_mask(pixels, plot_intensity(plot, contexts, params, shape), plot.mask)
    return pixels


def render(plots, params, workers=WORKERS, chunk_rows=CHUNK_ROWS, progress=True):
    """Render all plots into a (height, width, 3) uint8 image."""
    pixels = np.empty((params.height, params.width, 3), dtype=np.uint8)
    chunks = row_chunks(params.height, chunk_rows)

    with ThreadPoolExecutor(max_workers=workers) as executor, tqdm(
        total=params.height, desc="Rendering", unit="row", disable=not progress
    ) as bar:
        futures = {executor.submit(render_block, rows, plots, params): rows for rows in chunks}
        for future in as_completed(futures):
            start, stop = futures[future]
            pixels[start:stop] = future.result()
            bar.update(stop - start)

    return pixels


def image_format(path):
    """The Pillow format name for ``path``'s extension."""
    ext = os.path.splitext(str(path))[1].lower()
    fmt = Image.registered_extensions().get(ext)
    if fmt is None or fmt not in Image.SAVE:
        raise ArgumentError(f"Unrecognized file extension for image: '{path}'")
    return fmt


def save_image(pixels, path):
    fmt = image_format(path)
    try:
        Image.fromarray(pixels).save(path, format=fmt)
    except (OSError, ValueError) as exc:
        raise RenderError(f"Couldn't save file '{path}': {exc}") from exc
