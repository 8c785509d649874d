from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, overridable through EXOQUERY_* variables."""

    model_config = SettingsConfigDict(env_prefix="EXOQUERY_", env_file=".env", extra="ignore")

    # --- Catalog ---
    catalog_url: str = "https://api.le-systeme-solaire.net/rest/bodies/"
    # None disables the client timeout; callers own timeout policy
    catalog_timeout: Optional[float] = None

    # --- Textures ---
    asset_root: Path = Path("textures")
    texture_size: int = 1024

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "console"


settings = Settings()
