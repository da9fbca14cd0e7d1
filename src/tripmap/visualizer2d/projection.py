# projection.py
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


@dataclass(frozen=True)
class WebMercatorProjection:
    """EPSG:4326 -> EPSG:3857"""
    def __post_init__(self):
        from pyproj import Transformer
        object.__setattr__(self, "_to_merc",
            Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True))
    def lonlat_to_xy(self, lon, lat):
        return self._to_merc.transform(lon, lat)

    def project_latlon(self, points: Iterable[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
        """[(lat, lon), ...] -> (xs, ys) in metres"""
        pts = list(points)
        if not pts:
            return np.empty(0), np.empty(0)
        lat = np.array([p[0] for p in pts], dtype=float)
        lon = np.array([p[1] for p in pts], dtype=float)
        xs, ys = self._to_merc.transform(lon, lat)
        return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)
