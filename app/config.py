from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Optional

from app.core import config as defaults

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Outbound mail account: SMTP login, envelope sender and recipient
    EMAIL_USER: Optional[str] = Field(None, description="Mailbox the submissions are sent from and to")
    EMAIL_PASS: Optional[str] = Field(None, description="Mailbox password or app authorization code")

    # SMTP relay settings
    SMTP_HOST: str = Field(defaults.SMTP_HOST)
    SMTP_PORT: int = Field(defaults.SMTP_PORT)
    SMTP_TIMEOUT: float = Field(defaults.SMTP_TIMEOUT, description="Connect/greeting/socket timeout in seconds")

    # Message presentation
    BRAND_NAME: str = Field("FocalRailways")
    FALLBACK_CONTACT: Optional[str] = Field(None, description="Address quoted when a send fails")
    TIMEZONE: str = Field("Asia/Shanghai", description="Zone used for the rendered submission time")

    # Logging configuration
    LOG_LEVEL: str = Field("INFO")
    LOG_FILE_PATH: Optional[str] = Field(None, description="Also write JSON logs to this file")

    @field_validator("EMAIL_USER", "EMAIL_PASS", "FALLBACK_CONTACT", "LOG_FILE_PATH", mode="before")
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.EMAIL_USER and self.EMAIL_PASS)

    @property
    def fallback_contact(self) -> Optional[str]:
        return self.FALLBACK_CONTACT or self.EMAIL_USER

def get_settings() -> Settings:
    """Read settings from the environment.

    Called at the start of every invocation so credential changes take effect
    without a restart; nothing is cached between requests.
    """
    return Settings()
