# region Imports
import io
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from xmrg.models import Grid
# endregion

# region Matplotlib Preview
def render_grid(grid: Grid, title: str = "XMRG precipitation (mm)", ax=None):
    """
    Draw the grid with no-data masked. Row 0 is the southern edge on disk, so
    the image origin is at the bottom. Returns the figure.
    """
    h = grid.header
    masked = np.ma.masked_less(grid.values, 0.0)
    extent = (h.origin_x - 0.5, h.origin_x + h.columns - 0.5,
              h.origin_y - 0.5, h.origin_y + h.rows - 0.5)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    img = ax.imshow(masked, origin="lower", cmap="Blues", extent=extent)
    cbar = fig.colorbar(img, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("mm")
    ax.set_xlabel("HRAP x")
    ax.set_ylabel("HRAP y")
    ax.set_title(title)
    fig.tight_layout()
    return fig


def show_grid(grid: Grid, title: str = "XMRG precipitation (mm)"):
    render_grid(grid, title=title)
    plt.show()
# endregion

# region PNG Preview
def grid_to_png(grid: Grid) -> bytes:
    """Grayscale PNG, north up, scaled between the 2nd and 98th percentile of
    measured values; no-data cells are black."""
    arr = np.flipud(grid.values)
    valid = arr[arr >= 0.0]
    if valid.size == 0:
        lo, hi = 0.0, 1.0
    else:
        lo, hi = np.percentile(valid, [2, 98])
        if hi <= lo:
            lo, hi = float(valid.min()), float(valid.max())
            if hi <= lo:
                lo, hi = lo - 1.0, lo

    scaled = np.clip((arr - lo) / max(hi - lo, 1e-6), 0, 1)
    scaled[arr < 0.0] = 0.0
    buf = io.BytesIO()
    Image.fromarray((scaled * 255).astype("uint8")).save(buf, "PNG")
    return buf.getvalue()
# endregion
