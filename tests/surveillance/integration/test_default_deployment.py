"""
Regression fixture: default 7-point perimeter around the Riihimäki base
against the 11-camera default deployment (S2 in maintenance, C2 offline).
"""
import pytest
from omegaconf import OmegaConf
from src.common.exceptions import ConfigurationError
from src.surveillance.application.analyzer import CoverageAnalyzer
from src.surveillance.domain.entities import CoverageStatus
from src.surveillance.infrastructure import InMemoryAlertRepository, InMemoryCameraRepository, seed_deployment

EXPECTED_COVERING = [
    ("HEIMDALL-W1", "HEIMDALL-W2", "HEIMDALL-C1"), # Northwest
    ("HEIMDALL-N2", "HEIMDALL-C1"),                # Northeast
    ("HEIMDALL-E1", "HEIMDALL-E2"),                # East
    ("HEIMDALL-E2",),                              # Southeast
    (),                                            # South
    (),                                            # Southwest
    (),                                            # West
]

def test_deployment_is_seeded(builder, default_sensors):
    assert len(default_sensors) == 11
    inactive = sorted(s.id for s in default_sensors if not s.operational)
    assert inactive == ["HEIMDALL-C2", "HEIMDALL-S2"]
    assert len(builder.alerts.list()) == 3

def test_default_deployment_report(default_perimeter, default_sensors):
    report = CoverageAnalyzer().analyze(default_perimeter, default_sensors)
    assert report.total_points == 7
    assert report.covered_points == 4
    assert report.redundant_points == 3
    assert report.vulnerable_points == 1
    assert report.blind_spots == 3
    assert report.status == CoverageStatus.CRITICAL

def test_default_deployment_per_checkpoint(default_perimeter, default_sensors):
    details = CoverageAnalyzer().point_coverage(default_perimeter, default_sensors)
    assert [d.camera_ids for d in details] == EXPECTED_COVERING

def test_parallel_analysis_matches(default_perimeter, default_sensors):
    assert (CoverageAnalyzer(max_workers=3).analyze(default_perimeter, default_sensors)
            == CoverageAnalyzer().analyze(default_perimeter, default_sensors))

def test_invalid_deployment_is_a_configuration_error():
    deployment = OmegaConf.create({"cameras": [{"camera_id": "X", "latitude": 0, "longitude": 0,
                                                "range": 10, "fov": 90, "heading": 0}]})
    with pytest.raises(ConfigurationError):
        seed_deployment(deployment, InMemoryCameraRepository(), InMemoryAlertRepository())
