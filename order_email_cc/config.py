"""Configuration loaded from environment variables.

Uses pydantic-settings so every field can be overridden via env vars.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import EmailType

DEFAULT_META_KEY = "wc_additional_email_addresses"


class EmailCCConfig(BaseSettings):
    """Behaviour of the CC enrichment itself."""

    model_config = SettingsConfigDict(env_prefix="EMAIL_CC_")

    meta_key: str = Field(
        default=DEFAULT_META_KEY,
        description="User-meta key holding the raw address list (must stay stable across releases)",
    )
    customer_email_types: list[EmailType] = Field(
        default_factory=lambda: list(EmailType),
        description="Customer-facing order email types that receive CC headers",
    )
    header_name: str = Field(
        default="Cc",
        description="Header name used for each appended address",
    )


class Settings(BaseSettings):
    """Top-level settings for the standalone admin API.

    All env vars are prefixed with ``EMAIL_CC_ADMIN_``.
    Example: ``EMAIL_CC_ADMIN_DATABASE_URL=postgresql://...``
    """

    model_config = SettingsConfigDict(env_prefix="EMAIL_CC_ADMIN_")

    # --- Database -----------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///email_cc.db",
        description="SQLAlchemy URL of the user-meta store",
    )

    # --- Server -------------------------------------------------------------
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Use JSON log output (True for prod, False for dev)",
    )

    email_cc: EmailCCConfig = Field(default_factory=EmailCCConfig)
