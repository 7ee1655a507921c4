import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence

import numpy as np

from ..domain.entities import CameraSensor, CoverageReport, GeoPoint, PointCoverage
from ..domain.visibility import covers
from ..domain.classifier import classify
from ...common.logging import setup_logger, log_execution_time

MIN_PERIMETER_POINTS = 3

class CoverageAnalyzer:
    """
    Evaluates every perimeter checkpoint against every camera and aggregates
    the per-checkpoint redundancy into a CoverageReport.

    Checkpoints are independent of each other, so with max_workers > 1 they
    are evaluated on a thread pool; the result is identical to the
    sequential run.
    """
    def __init__(self, max_workers: int = 0):
        self.max_workers = max_workers
        self.logger = setup_logger(__name__)

    def _map(self, func: Callable, items: Sequence) -> List:
        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                return list(pool.map(func, items))
        return [func(item) for item in items]

    def coverage_matrix(self, perimeter: Sequence[GeoPoint],
                        cameras: Sequence[CameraSensor]) -> np.ndarray:
        """
        Boolean mask of shape (checkpoints, cameras), True where the camera
        covers the checkpoint.
        """
        rows = self._map(lambda point: [covers(point, camera) for camera in cameras], perimeter)
        return np.array(rows, dtype=bool).reshape(len(perimeter), len(cameras))

    def point_coverage(self, perimeter: Sequence[GeoPoint],
                       cameras: Sequence[CameraSensor]) -> List[PointCoverage]:
        """
        Covering camera ids for each checkpoint, in perimeter order.
        """
        mask = self.coverage_matrix(perimeter, cameras)
        camera_ids = [camera.id for camera in cameras]
        return [
            PointCoverage(point=point, camera_ids=tuple(camera_ids[j] for j in np.where(row)[0]))
            for point, row in zip(perimeter, mask)
        ]

    @log_execution_time(logging.getLogger(__name__))
    def analyze(self, perimeter: Sequence[GeoPoint],
                cameras: Sequence[CameraSensor]) -> CoverageReport:
        """
        Full recomputation of the perimeter coverage.

        Returns an unclassified all-zero report when fewer than 3 usable
        checkpoints are given.
        """
        points = [p for p in perimeter if p.is_finite()]
        if len(points) < len(perimeter):
            self.logger.warning(f"Excluded {len(perimeter) - len(points)} non-finite perimeter points")

        if len(points) < MIN_PERIMETER_POINTS:
            self.logger.info(f"Perimeter has {len(points)} points, coverage not analyzable")
            return CoverageReport()

        sensors = [c for c in cameras if c.is_finite()]
        if len(sensors) < len(cameras):
            self.logger.warning(f"Excluded {len(cameras) - len(sensors)} cameras with non-finite geometry")

        counts = self.coverage_matrix(points, sensors).sum(axis=1)

        total = len(points)
        covered = int(np.count_nonzero(counts >= 1))
        redundant = int(np.count_nonzero(counts >= 2))
        vulnerable = int(np.count_nonzero(counts == 1))

        report = CoverageReport(
            total_points=total,
            covered_points=covered,
            redundant_points=redundant,
            vulnerable_points=vulnerable,
            status=classify(covered / total * 100, redundant / total * 100)
        )
        self.logger.debug(
            f"Coverage {report.covered_points}/{total}, redundant {report.redundant_points}, "
            f"blind {report.blind_spots} -> {report.status.value}"
        )
        return report
