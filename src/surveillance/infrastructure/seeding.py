from omegaconf import DictConfig, OmegaConf
from pydantic import ValidationError

from .repositories import InMemoryAlertRepository, InMemoryCameraRepository
from ...common.schemas import CameraCreate, DroneAlertCreate
from ...common.exceptions import ConfigurationError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

def seed_deployment(deployment: DictConfig,
                    cameras: InMemoryCameraRepository,
                    alerts: InMemoryAlertRepository) -> int:
    """
    Registers the cameras and sample alerts of a deployment file.
    Returns the number of cameras registered.
    """
    raw = OmegaConf.to_container(deployment, resolve=True)

    try:
        camera_payloads = [CameraCreate.model_validate(c) for c in raw.get('cameras', [])]
        alert_payloads = [DroneAlertCreate.model_validate(a) for a in raw.get('alerts', [])]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid deployment data: {e}") from e

    for payload in camera_payloads:
        cameras.create(payload)
    for payload in alert_payloads:
        alerts.create(payload)

    active = sum(1 for c in camera_payloads if c.status == "active")
    logger.info(
        f"Deployed {len(camera_payloads)} cameras ({active} active) "
        f"and {len(alert_payloads)} sample alerts"
    )
    return len(camera_payloads)
