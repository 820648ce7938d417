"""JSON report generation for captured points and fits."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from .. import __version__
from ..config import COORDINATE_DECIMALS
from ..core.store import PointStore
from .formatters import fit_to_dict

logger = logging.getLogger(__name__)


class JSONReporter:
    """Generate structured JSON reports of a capture session."""

    def __init__(self, indent: int = 2) -> None:
        """Initialize JSON reporter.

        Args:
            indent: JSON indentation for readable output
        """
        self.indent = indent

    def build_report(self, store: PointStore) -> Dict[str, Any]:
        return {
            "metadata": {
                "generated": datetime.now().isoformat(),
                "generator": "probefit",
                "version": __version__,
                "units": "mm",
            },
            "statistics": store.statistics(),
            "points": self._build_points_data(store),
            "geometry": self._build_geometry_data(store),
        }

    def generate_report(self, store: PointStore, output_path: Path) -> None:
        """Write the report for ``store`` to ``output_path``."""
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.build_report(store), f, indent=self.indent)
        logger.info(f"Saved JSON report: {output_path}")

    def _build_points_data(self, store: PointStore) -> List[Dict[str, Any]]:
        c = COORDINATE_DECIMALS
        return [
            {
                "number": p.number,
                "type": p.type,
                "x": round(p.x, c),
                "y": round(p.y, c),
                "z": round(p.z, c),
                "geometry_id": p.geometry_id,
                "timestamp": p.timestamp,
            }
            for p in store.points
        ]

    def _build_geometry_data(self, store: PointStore) -> List[Dict[str, Any]]:
        geometry = []
        for geometry_id, record in store.fits.items():
            entry = {"id": geometry_id, "point_indices": list(record.point_indices)}
            entry.update(fit_to_dict(record.result))
            geometry.append(entry)
        return geometry
