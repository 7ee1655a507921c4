from dataclasses import dataclass, field
from typing import List

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class PointConfig:
    latitude: float = 0.0
    longitude: float = 0.0

@dataclass
class CoverageConfig:
    max_workers: int = 0 # 0 evaluates checkpoints sequentially
    fov_polygon_step: float = 5.0
    perimeter: List[PointConfig] = field(default_factory=list)

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    deployment: str = "riihimaki"
