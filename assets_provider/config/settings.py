import os
from functools import lru_cache
from pydantic import BaseModel


class Settings(BaseModel):
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "info")
    service_name: str = os.getenv("SERVICE_NAME", "assets-provider")

    # Roots that asset directory and URL overrides are appended to
    root_directory: str = os.getenv("ASSETS_ROOT_DIRECTORY", os.getcwd())
    root_url: str = os.getenv("ASSETS_ROOT_URL", "http://localhost:8080")

    # YAML file holding assetDirectory, assetUrl and assets
    config_path: str | None = os.getenv("ASSETS_CONFIG_PATH")

    # Observability
    otel_exporter_otlp_endpoint: str | None = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
