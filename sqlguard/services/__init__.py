"""
Service layer for business logic
"""
from sqlguard.services.validation_service import QueryValidator, validate, is_valid, version
from sqlguard.services.alert_service import (
    Notifier,
    EmailNotifier,
    WebhookNotifier,
    CallableNotifier,
    build_notifier,
)

__all__ = [
    "QueryValidator",
    "validate",
    "is_valid",
    "version",
    "Notifier",
    "EmailNotifier",
    "WebhookNotifier",
    "CallableNotifier",
    "build_notifier",
]
