import warnings
from pathlib import Path

from pydantic_settings import BaseSettings

REPO_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Process configuration, read from the environment and .env.

    The map and category catalog is not configured here; see
    app.maps.catalog.DEFAULT_CATALOG.
    """

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_TIMEOUT_MS: int = 5000
    DATABASE_NAME: str = "asa_maps"
    API_KEY: str = "changeme"
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:4000"
    DOCS_ENABLED: bool = True
    DATA_DIR: Path = REPO_ROOT / "data"  # Holds one {MapName}.csv per map
    LOAD_ON_STARTUP: bool = True  # Reload every map and seed taming data at startup
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env"}

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()

if settings.API_KEY == "changeme":
    warnings.warn(
        "API_KEY is still 'changeme'; anyone can reload map tables. "
        "Set API_KEY in the environment or .env before deploying.",
        stacklevel=1,
    )
