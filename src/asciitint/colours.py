import numpy as np
from PIL import Image

SAMPLING_POLICIES = ("nearest", "average")


def _cell_centres(cells: int, pixels: int) -> np.ndarray:
    """Source pixel index under the centre of each cell along one axis."""
    centres = ((np.arange(cells) + 0.5) * pixels / cells).astype(np.intp)
    return np.clip(centres, 0, pixels - 1)


def sample_colours(image: Image.Image, width: int, height: int, policy: str = "nearest") -> np.ndarray:
    """Compute one RGB colour per grid cell from the full-resolution image.

    Cell coordinates are scaled by orig_size / grid_size so every cell maps
    inside the image. "nearest" takes the pixel under the cell centre,
    "average" takes the mean of every pixel the cell covers.

    Returns array of shape (height, width, 3) as uint8. Alpha is dropped.
    """
    if policy not in SAMPLING_POLICIES:
        raise ValueError(f"Unknown sampling policy: {policy!r}")
    rgb = image.convert("RGB")

    if policy == "average":
        return np.asarray(rgb.resize((width, height), Image.BOX), dtype=np.uint8)

    arr = np.asarray(rgb, dtype=np.uint8)
    ys = _cell_centres(height, rgb.height)
    xs = _cell_centres(width, rgb.width)
    return arr[np.ix_(ys, xs)]
