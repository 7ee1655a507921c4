class SurveillanceError(Exception):
    """Base exception for all surveillance dashboard errors."""
    pass

class ConfigurationError(SurveillanceError):
    """Raised when configuration is invalid or missing."""
    pass

class CameraNotFoundError(SurveillanceError):
    """Raised when a camera lookup fails."""
    pass

class DuplicateCameraError(SurveillanceError):
    """Raised when registering a camera_id that already exists."""
    pass

class AlertNotFoundError(SurveillanceError):
    """Raised when a drone alert lookup fails."""
    pass

class InvalidPerimeterError(SurveillanceError):
    """Raised when a perimeter definition contains unusable coordinates."""
    pass

class FeedStateError(SurveillanceError):
    """Raised when a feed command is not allowed in the current feed state."""
    pass
