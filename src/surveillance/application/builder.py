from omegaconf import DictConfig
from typing import Dict, Optional

from .analyzer import CoverageAnalyzer
from .services.coverage import CoverageService
from .services.alerts import AlertService
from .services.feed import FeedManager
from ..domain.entities import GeoPoint
from ..infrastructure import InMemoryAlertRepository, InMemoryCameraRepository, seed_deployment
from ...common.config.manager import ConfigManager
from ...common.logging import setup_logger

class SurveillanceApplicationBuilder:
    """
    Builder pattern for constructing the dashboard services.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig, config_manager: Optional[ConfigManager] = None):
        self.config = ConfigManager.with_defaults(config)
        self.config_manager = config_manager or ConfigManager()
        self.logger = setup_logger(__name__)

        # Components
        self.cameras: Optional[InMemoryCameraRepository] = None
        self.alerts: Optional[InMemoryAlertRepository] = None
        self.analyzer: Optional[CoverageAnalyzer] = None
        self.coverage_service: Optional[CoverageService] = None
        self.alert_service: Optional[AlertService] = None
        self.feeds: Optional[FeedManager] = None

    def build_repositories(self) -> 'SurveillanceApplicationBuilder':
        self.cameras = InMemoryCameraRepository()
        self.alerts = InMemoryAlertRepository()
        return self

    def seed(self, deployment: Optional[str] = None) -> 'SurveillanceApplicationBuilder':
        name = deployment or self.config.deployment
        self.logger.info(f"Seeding deployment '{name}'...")
        seed_deployment(self.config_manager.load_deployment(name), self.cameras, self.alerts)
        return self

    def build_analyzer(self) -> 'SurveillanceApplicationBuilder':
        self.analyzer = CoverageAnalyzer(max_workers=self.config.coverage.max_workers)
        return self

    def build_services(self) -> 'SurveillanceApplicationBuilder':
        coverage_cfg = self.config.coverage
        perimeter = [
            GeoPoint(latitude=p.latitude, longitude=p.longitude)
            for p in coverage_cfg.perimeter
        ]
        self.coverage_service = CoverageService(
            self.cameras,
            self.analyzer,
            default_perimeter=perimeter,
            fov_step=coverage_cfg.fov_polygon_step
        )
        self.alert_service = AlertService(self.alerts, self.cameras)
        self.feeds = FeedManager()
        return self

    def get_components(self) -> Dict:
        return {
            'cameras': self.cameras,
            'alerts': self.alerts,
            'analyzer': self.analyzer,
            'coverage_service': self.coverage_service,
            'alert_service': self.alert_service,
            'feeds': self.feeds
        }
