"""
Maps aggregate coverage figures to a discrete network status.
"""
from .entities import CoverageStatus

OPTIMAL_COVERAGE_PERCENT = 100.0
OPTIMAL_REDUNDANCY_PERCENT = 80.0
GOOD_COVERAGE_PERCENT = 90.0
GOOD_REDUNDANCY_PERCENT = 60.0
ACCEPTABLE_COVERAGE_PERCENT = 75.0

def classify(coverage_percent: float, redundancy_percent: float) -> CoverageStatus:
    """
    Ordered decision list, first match wins.
    """
    if (coverage_percent == OPTIMAL_COVERAGE_PERCENT
            and redundancy_percent >= OPTIMAL_REDUNDANCY_PERCENT):
        return CoverageStatus.OPTIMAL
    if (coverage_percent >= GOOD_COVERAGE_PERCENT
            and redundancy_percent >= GOOD_REDUNDANCY_PERCENT):
        return CoverageStatus.GOOD
    if coverage_percent >= ACCEPTABLE_COVERAGE_PERCENT:
        return CoverageStatus.ACCEPTABLE
    return CoverageStatus.CRITICAL
