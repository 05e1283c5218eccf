"""
config.py — Settings
====================
One place for the knobs of the HTTP service, read from the environment
with pydantic-settings.

    GRAPHKIT_SERVER_PORT=8080
    GRAPHKIT_LOG_LEVEL=DEBUG
    GRAPHKIT_QUERY_COMPONENT_POLICY=exclude_isolated

The core algorithms never read settings; only main.py does, and passes
values down explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Flask server.  Environment variables prefixed with GRAPHKIT_SERVER_."""

    model_config = SettingsConfigDict(env_prefix="GRAPHKIT_SERVER_")

    host:  str  = "0.0.0.0"
    port:  int  = 5000
    debug: bool = False


class QueryConfig(BaseSettings):
    """Query defaults.  Environment variables prefixed with GRAPHKIT_QUERY_."""

    model_config = SettingsConfigDict(env_prefix="GRAPHKIT_QUERY_")

    default_representation: Literal["list", "matrix", "incidence"] = "list"
    component_policy: Literal["include_isolated", "exclude_isolated"] = "include_isolated"
    # backtracking is factorial; refuse bigger requests at the HTTP boundary
    max_isomorphism_vertices: int = Field(default=12, ge=0)


class LogConfig(BaseSettings):
    """Logging.  Environment variables prefixed with GRAPHKIT_LOG_."""

    model_config = SettingsConfigDict(env_prefix="GRAPHKIT_LOG_")

    level:  str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Aggregate of all sub-configs.  Environment variables prefixed with GRAPHKIT_."""

    model_config = SettingsConfigDict(env_prefix="GRAPHKIT_")

    server: ServerConfig = Field(default_factory=ServerConfig)
    query:  QueryConfig  = Field(default_factory=QueryConfig)
    log:    LogConfig    = Field(default_factory=LogConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Cached settings; call get_config.cache_clear() after changing the environment."""
    return AppConfig()
