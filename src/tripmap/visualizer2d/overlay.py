# overlay.py
import math
from dataclasses import dataclass
import numpy as np
import contextily as ctx

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)
DEFAULT_MAX_ZOOM = 19  # URLテンプレートにはメタデータがない


@dataclass(frozen=True)
class TileOverlay:
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    max_px: int = 8192

    def provider(self):
        """TileProvider named by ``tiles``, or the URL template as given."""
        if "://" in self.tiles:
            return self.tiles
        return ctx.providers.query_name(self.tiles)

    def auto_zoom(self, xmin, ymin, xmax, ymax, width_px: int, provider) -> int:
        """Zoom whose resolution fits the extent into ``width_px`` pixels."""
        span = max(xmax - xmin, ymax - ymin, 1.0)
        target_m_per_px = span / max(1, width_px)
        zoom = int(np.floor(np.log2(INITIAL_RES / target_m_per_px)))
        zmin = getattr(provider, "min_zoom", 0)
        zmax = getattr(provider, "max_zoom", DEFAULT_MAX_ZOOM)
        return int(np.clip(zoom, zmin, zmax))

    def cap_zoom(self, xmin, xmax, zoom: int) -> int:
        """Lower ``zoom`` until the stitched image is at most ``max_px`` wide."""
        w_px = (xmax - xmin) * 2 ** zoom / INITIAL_RES
        if w_px <= self.max_px:
            return zoom
        return max(0, zoom - math.ceil(math.log2(w_px / self.max_px)))

    def fetch(self, Xmin, Ymin, Xmax, Ymax, width_px: int):
        """Web Mercator bbox -> (img, extent, zoom)"""
        provider = self.provider()
        z = self.zoom
        if z is None:
            z = self.auto_zoom(Xmin, Ymin, Xmax, Ymax, width_px, provider)
        z = self.cap_zoom(Xmin, Xmax, z)
        img, extent_wm = ctx.bounds2img(Xmin, Ymin, Xmax, Ymax, source=provider, zoom=z, ll=False)
        return img, extent_wm, z
