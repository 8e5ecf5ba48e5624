"""
Controllers
All routes organized by layer
"""
from sqlguard.controllers import validation_controller

__all__ = [
    "validation_controller",
]
