"""
Infrastructure module initialization.
"""
from .repositories import InMemoryCameraRepository, InMemoryAlertRepository
from .seeding import seed_deployment

__all__ = [
    "InMemoryCameraRepository",
    "InMemoryAlertRepository",
    "seed_deployment"
]
