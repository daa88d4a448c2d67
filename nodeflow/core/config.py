# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
nodeflow Configuration - Single source of truth.
YAML is king. Env vars ONLY for secrets.

- ALL tunables in configs/nodeflow.yaml
- Connector credentials ONLY from the environment
"""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================

@dataclass(frozen=True)
class Config:
    """
    Immutable application configuration.
    All values from YAML. No hidden state.
    """

    # -- Service --
    service_host: str = "0.0.0.0"
    service_port: int = 8000

    # -- Paths --
    workflows_path: str = "./workflows"

    # -- HTTP --
    http_timeout: float = 30.0

    # -- Connectors --
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    github_api_url: str = "https://api.github.com"
    github_max_items: int = 10
    calendar_max_results: int = 10
    smtp_use_tls: bool = True

    # -- AI --
    ai_max_tokens: int = 500
    openai_model: str = "gpt-3.5-turbo"
    gemini_model: str = "gemini-pro"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    anthropic_model: str = "claude-3-5-haiku-latest"

    # -- Logging --
    log_level: str = "INFO"
    log_format: str = "json"


# =============================================================================
# SECRETS - The ONLY thing from environment variables
# =============================================================================

@dataclass(frozen=True)
class Credentials:
    """
    Connector credentials.

    Every field is optional: a connector whose credentials are missing
    returns a simulated payload instead of calling out.
    """

    openweather_api_key: Optional[str] = None
    github_token: Optional[str] = None
    google_client_email: Optional[str] = None
    google_private_key: Optional[str] = None
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    openai_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    @property
    def has_google(self) -> bool:
        return bool(self.google_client_email and self.google_private_key)

    @property
    def has_smtp(self) -> bool:
        return bool(self.smtp_user and self.smtp_pass)


def load_credentials() -> Credentials:
    """API keys cannot be in version control."""
    private_key = os.getenv("GOOGLE_PRIVATE_KEY")
    if private_key:
        # Keys pasted into .env files carry literal "\n" sequences
        private_key = private_key.replace("\\n", "\n")

    return Credentials(
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY"),
        github_token=os.getenv("GITHUB_TOKEN"),
        google_client_email=os.getenv("GOOGLE_CLIENT_EMAIL"),
        google_private_key=private_key,
        smtp_host=os.getenv("SMTP_HOST"),
        smtp_port=int(os.getenv("SMTP_PORT", "587")),
        smtp_user=os.getenv("SMTP_USER"),
        smtp_pass=os.getenv("SMTP_PASS"),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        gemini_api_key=os.getenv("GEMINI_API_KEY"),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
    )


# =============================================================================
# LOADER
# =============================================================================

def load_config(path: str = "configs/nodeflow.yaml") -> Config:
    """
    Load configuration from YAML.
    Returns defaults if file doesn't exist.
    """
    if not Path(path).exists():
        return Config()

    with open(path) as f:
        y = yaml.safe_load(f) or {}

    # Helper to safely navigate nested dicts
    def get(d: dict, *keys, default=None):
        for k in keys:
            if not isinstance(d, dict):
                return default
            d = d.get(k, {})
        return d if d != {} else default

    defaults = Config()

    return Config(
        # Service
        service_host=get(y, "service", "host") or defaults.service_host,
        service_port=get(y, "service", "port") or defaults.service_port,

        # Paths
        workflows_path=get(y, "paths", "workflows") or defaults.workflows_path,

        # HTTP
        http_timeout=get(y, "http", "timeout") or defaults.http_timeout,

        # Connectors
        weather_api_url=get(y, "connectors", "weather", "url") or defaults.weather_api_url,
        github_api_url=get(y, "connectors", "github", "url") or defaults.github_api_url,
        github_max_items=get(y, "connectors", "github", "max_items") or defaults.github_max_items,
        calendar_max_results=get(y, "connectors", "calendar", "max_results") or defaults.calendar_max_results,
        smtp_use_tls=get(y, "connectors", "email", "use_tls", default=defaults.smtp_use_tls),

        # AI
        ai_max_tokens=get(y, "ai", "max_tokens") or defaults.ai_max_tokens,
        openai_model=get(y, "ai", "openai", "model") or defaults.openai_model,
        gemini_model=get(y, "ai", "gemini", "model") or defaults.gemini_model,
        gemini_api_url=get(y, "ai", "gemini", "url") or defaults.gemini_api_url,
        anthropic_model=get(y, "ai", "anthropic", "model") or defaults.anthropic_model,

        # Logging
        log_level=os.getenv("LOG_LEVEL") or get(y, "logging", "level") or defaults.log_level,
        log_format=get(y, "logging", "format") or defaults.log_format,
    )


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create global config instance."""
    global _config
    if _config is None:
        config_path = os.getenv("NODEFLOW_CONFIG_PATH", "configs/nodeflow.yaml")
        _config = load_config(config_path)
    return _config

