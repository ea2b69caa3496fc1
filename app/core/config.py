from typing import List, Optional

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "EAST Hides Lead API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # --- Environment & Debug ---
    ENVIRONMENT: str = "local"
    DEBUG: bool = False  # Default to False for security
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # --- SMTP relay ---
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_SECURE: bool = False  # implicit TLS (465); False means STARTTLS when offered
    SMTP_USER: Optional[str] = None
    SMTP_PASS: Optional[SecretStr] = None
    SMTP_REJECT_UNAUTH: bool = True
    SMTP_FROM: Optional[str] = None
    SMTP_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0)

    # --- Inboxes ---
    SALES_INBOX: str = "sales@east-hides.com"
    INFO_INBOX: str = "info@east-hides.com"

    # --- Acknowledgements ---
    CONTACT_CONFIRM: bool = False
    MAIL_CONFIRM: bool = False

    # --- Branding used in outgoing mail ---
    BRAND_NAME: str = "EAST Hides"
    COMPANY_LEGAL_NAME: str = "East Hides & investment company LTD"
    SITE_DOMAIN: str = "east-hides.com"

    # --- CORS ---
    ALLOWED_ORIGINS: List[str] = Field(
        default_factory=list,
        validate_default=True,
        description="List of allowed CORS origins. Configure in .env",
    )

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def default_allowed_origins(
        cls, v: Optional[List[str]], info: ValidationInfo
    ) -> Optional[List[str]]:
        env = info.data.get("ENVIRONMENT") or "local"
        if env != "production":
            if v is None:
                return ["http://localhost:3000"]
            if isinstance(v, str) and v.strip() in ("", "[]"):
                return ["http://localhost:3000"]
            if isinstance(v, list) and len(v) == 0:
                return ["http://localhost:3000"]
        return v

    @field_validator("SALES_INBOX", "INFO_INBOX", mode="before")
    @classmethod
    def blank_inbox_uses_default(cls, v: Optional[str], info: ValidationInfo) -> str:
        # An empty env var must not leave a mailbox unset.
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v


settings = Settings()
