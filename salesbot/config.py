"""
Configuration management for Salesbot.
Loads settings from environment variables with validation.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    data_dir: Path = Path(__file__).parent.parent / "data"
    public_dir: Path = Path(__file__).parent.parent / "public"
    catalog_path: Path = Field(
        default=Path(__file__).parent.parent / "data" / "catalog.json",
        description="JSON file with the product catalog",
    )

    # HTTP server
    host: str = Field(default="0.0.0.0", description="HTTP bind address")
    port: int = Field(default=3000, description="HTTP port")
    base_url: Optional[str] = Field(
        default=None, description="Public base URL (redirects, webhook signatures)"
    )

    # Telegram
    telegram_bot_token: Optional[str] = Field(
        default=None, description="Telegram Bot API token"
    )

    # Twilio (SMS / WhatsApp)
    twilio_account_sid: Optional[str] = Field(default=None, description="Twilio account SID")
    twilio_auth_token: Optional[str] = Field(default=None, description="Twilio auth token")
    twilio_whatsapp_number: Optional[str] = Field(
        default=None, description="Twilio WhatsApp sender number"
    )
    twilio_validate_signature: bool = Field(
        default=True, description="Validate X-Twilio-Signature when an auth token is set"
    )
    whatsapp_search_when_idle: bool = Field(
        default=False, description="Match free text against the catalog outside a recommendation"
    )

    # Stripe
    stripe_secret_key: Optional[str] = Field(default=None, description="Stripe secret key")

    # Lead storage
    lead_store_backend: Literal["auto", "mongo", "sql", "memory"] = Field(
        default="auto", description="Lead store backend"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy async URL for the relational lead store",
    )
    mongodb_uri: Optional[str] = Field(default=None, description="MongoDB connection URI")
    mongodb_database: str = Field(default="salesbot", description="MongoDB database name")

    # Assistant behaviour
    assistant_name: str = Field(default="Asistente Amway", description="Name used in greetings")
    recommend_limit: int = Field(default=6, description="Max results for /recommend")
    chat_match_limit: int = Field(default=3, description="Max products shown in chat")
    default_currency: str = Field(
        default="usd", description="Currency for checkout items not found in the catalog"
    )
    catalog_keywords: list[str] = Field(
        default=["catalog", "catálogo", "catalogo", "ver", "productos"],
        description="Words that ask for the category list",
    )
    recommend_keywords: list[str] = Field(
        default=["recom", "suger", "aconsej"],
        description="Words that ask for a recommendation",
    )
    catalog_shortcuts: list[str] = Field(default=["1"], description="Menu option for the catalog")
    recommend_shortcuts: list[str] = Field(
        default=["2"], description="Menu option for a recommendation"
    )

    # Debug
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def sqlite_path(self) -> Path:
        """Path to SQLite database file."""
        return self.data_dir / "salesbot.db"

    @property
    def db_url(self) -> str:
        """Get database URL with absolute path."""
        if self.database_url:
            return self.database_url
        return f"sqlite+aiosqlite:///{self.sqlite_path}"

    @property
    def public_base_url(self) -> str:
        """Base URL without trailing slash."""
        return (self.base_url or f"http://localhost:{self.port}").rstrip("/")

    @property
    def success_url(self) -> str:
        return f"{self.public_base_url}/success.html"

    @property
    def cancel_url(self) -> str:
        return f"{self.public_base_url}/cancel.html"


# Global settings instance
settings = Settings()
