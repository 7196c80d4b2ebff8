import yaml
import os
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./arcuspath.db"
    # Insert the bundled sample providers on startup when missing
    seed_on_startup: bool = True


class SearchConfig(BaseModel):
    """Defaults for the provider search pipeline."""
    default_page_size: int = Field(default=20, ge=1)
    default_sort: str = "trust"  # trust|rating|newest|alphabetical
    featured_limit: int = Field(default=4, ge=1)


class ReportsConfig(BaseModel):
    """Safety report intake."""
    rate_limit: str = "5/minute"  # slowapi limit string, per client address
    min_description_length: int = 10
    max_description_length: int = 2000


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    reports: ReportsConfig = Field(default_factory=ReportsConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_yaml(config_path: str) -> Dict[str, Any]:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")
        if not os.path.exists(config_path):
            return {}

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Web server overrides (Docker)
    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    if 'LOG_LEVEL' in os.environ:
        data.setdefault('logging', {})
        data['logging']['level'] = os.environ['LOG_LEVEL']

    return data


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    """
    Load configuration from YAML and apply environment variable overrides.

    A missing file yields the defaults, so the service starts with no config.
    """
    data = _read_yaml(config_path) if config_path else {}
    data = _apply_env_overrides(data)
    return AppConfig(**data)
