import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
DOTENV_PATH = (Path(__file__).resolve().parent.parent.parent / ".env")
load_dotenv(dotenv_path=DOTENV_PATH, override=False)

_TRUTHY = {"1", "true", "True", "YES", "yes", "on"}


class Settings:
    # Validation defaults (passed explicitly into validate() by callers)
    VALIDATION_ENABLED: bool = os.getenv("VALIDATION_ENABLED", "1").strip() in _TRUTHY
    VALIDATION_VERBOSE: bool = os.getenv("VALIDATION_VERBOSE", "0").strip() in _TRUTHY

    # Email alerts
    ALERT_EMAIL_TO: str = os.getenv("ALERT_EMAIL_TO", "").strip()
    ALERT_EMAIL_FROM: str = os.getenv("ALERT_EMAIL_FROM", "noreply@sqlguard.local").strip()
    SMTP_HOST: str = os.getenv("SMTP_HOST", "").strip()
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "25").strip() or "25")

    # Webhook alerts
    ALERT_WEBHOOK_URL: str = os.getenv("ALERT_WEBHOOK_URL", "").strip()
    ALERT_TIMEOUT: float = float(os.getenv("ALERT_TIMEOUT", "10").strip() or "10")

    # App Configuration
    APP_TITLE: str = "SQLGuard - SQL Query Validator"

    def validate(self):
        if self.ALERT_EMAIL_TO and not self.SMTP_HOST:
            raise RuntimeError(
                "ALERT_EMAIL_TO set without SMTP_HOST in .env. "
                "Configure SMTP_HOST (and SMTP_PORT) to send email alerts."
            )
        if self.ALERT_WEBHOOK_URL and not self.ALERT_WEBHOOK_URL.startswith(("http://", "https://")):
            raise RuntimeError(
                f"Invalid ALERT_WEBHOOK_URL: {self.ALERT_WEBHOOK_URL!r} (expected http:// or https://)"
            )


settings = Settings()
settings.validate()
