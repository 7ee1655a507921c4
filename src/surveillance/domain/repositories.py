"""
Domain repositories for the surveillance module.
"""
from typing import List, Protocol

class CameraRepository(Protocol):
    """
    Source of registered cameras for coverage analysis.
    """
    def list(self) -> List:
        ...
