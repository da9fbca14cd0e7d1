# renderer.py
from __future__ import annotations
import logging
from typing import List

import numpy as np
import matplotlib.pyplot as plt

from tripmap.model.models import RenderError
from .markers import Marker, Path
from .overlay import TileOverlay
from .projection import WebMercatorProjection

log = logging.getLogger(__name__)

DPI = 100
MIN_SPAN_M = 2000.0  # 単一点でも地図として見える範囲
PADDING = 0.1


class MapContext:
    """Collects markers and paths, then renders them onto a static map image."""

    def __init__(self, width: int = 600, height: int = 400, overlay: TileOverlay | None = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.ov = overlay
        self.p = WebMercatorProjection()
        self._markers: List[Marker] = []
        self._paths: List[Path] = []

    def add_marker(self, marker: Marker) -> None:
        self._markers.append(marker)

    def add_path(self, path: Path) -> None:
        self._paths.append(path)

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(self._markers)

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def extent(self) -> tuple[float, float, float, float]:
        """Web Mercator (xmin, ymin, xmax, ymax) covering every object, padded
        and stretched to the image aspect ratio."""
        pts = [(m.lat, m.lon) for m in self._markers]
        for pa in self._paths:
            pts.extend(pa.points)
        if not pts:
            raise RenderError("cannot determine map center: nothing to render")

        xs, ys = self.p.project_latlon(pts)
        cx, cy = (xs.min() + xs.max()) * 0.5, (ys.min() + ys.max()) * 0.5
        w = max(xs.max() - xs.min(), MIN_SPAN_M) * (1 + 2 * PADDING)
        h = max(ys.max() - ys.min(), MIN_SPAN_M) * (1 + 2 * PADDING)

        aspect = self.width / self.height
        if w / h < aspect:
            w = h * aspect
        else:
            h = w / aspect
        return cx - w / 2, cy - h / 2, cx + w / 2, cy + h / 2

    def render(self) -> np.ndarray:
        """Draw everything and return an RGBA image of ``height x width``."""
        xmin, ymin, xmax, ymax = self.extent()

        fig = plt.figure(figsize=(self.width / DPI, self.height / DPI), dpi=DPI)
        try:
            ax = fig.add_axes((0, 0, 1, 1))
            ax.set_axis_off()

            # 背景地図
            if self.ov:
                try:
                    img, ext, z = self.ov.fetch(xmin, ymin, xmax, ymax, self.width)
                except Exception as e:
                    raise RenderError(f"tile fetch failed: {e}") from e
                log.debug("tiles zoom=%d extent=%s", z, ext)
                ax.imshow(img, extent=ext, origin="upper", interpolation="bilinear", zorder=0)

            # 経路
            for pa in self._paths:
                px, py = self.p.project_latlon(pa.points)
                ax.plot(px, py, color=pa.color, linewidth=pa.width, zorder=3)

            # マーカー
            for m in self._markers:
                mx, my = self.p.lonlat_to_xy(m.lon, m.lat)
                ax.plot(mx, my, marker="o", markersize=2 * m.radius,
                        mfc=m.color, mec=m.color, linestyle="none", zorder=6)

            ax.set_xlim(xmin, xmax)
            ax.set_ylim(ymin, ymax)
            fig.canvas.draw()
            return np.asarray(fig.canvas.buffer_rgba()).copy()
        finally:
            plt.close(fig)

    def save(self, path, img: np.ndarray | None = None) -> None:
        """Write a PNG; renders first when ``img`` is not given."""
        if img is None:
            img = self.render()
        plt.imsave(path, img, format="png")
