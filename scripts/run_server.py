import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.logging import configure_logging, setup_logger
from src.surveillance.application.builder import SurveillanceApplicationBuilder
from src.surveillance.presentation.api import init_app

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    package = configure_logging(cfg.logging.level)
    logger = setup_logger("surveillance", level=package.level)
    logger.info("Configuration loaded.")

    builder = (
        SurveillanceApplicationBuilder(cfg)
        .build_repositories()
        .seed()
        .build_analyzer()
        .build_services()
    )
    app = init_app(builder.get_components())

    report = builder.coverage_service.report()
    if report.is_classified:
        logger.info(
            f"Initial coverage: {report.coverage_percent:.1f}% "
            f"(redundancy {report.redundancy_percent:.1f}%) -> {report.status.value.upper()}"
        )

    server_cfg = builder.config.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
