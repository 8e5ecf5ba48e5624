from .validation_schema import ValidateRequest, VersionResponse

__all__ = [
    "ValidateRequest",
    "VersionResponse",
]
