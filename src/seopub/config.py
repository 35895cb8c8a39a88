"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"

# Conventional variable names honoured alongside SEOPUB_<FIELD>
ENV_ALIASES = {
    "openai_api_key":    "OPENAI_API_KEY",
    "sanity_project_id": "SANITY_PROJECT_ID",
    "sanity_dataset":    "SANITY_DATASET",
    "sanity_token":      "SANITY_API_TOKEN",
    "port":              "PORT",
    "log_level":         "LOG_LEVEL",
}


class Settings(BaseModel):
    app_name:       str = "seopub"
    openai_api_key: str = Field(default="",            description="OpenAI API key; empty disables LLM features")
    openai_model:   str = Field(default="gpt-4o-mini", description="Chat completion model")
    enrich_mode:    str = Field(default="combined", pattern="^(combined|split)$",
                                description="combined: one delimited LLM call; split: metadata + content calls")
    sanity_project_id:  Optional[str] = Field(default=None, description="Sanity project id")
    sanity_dataset:     str = Field(default="production", description="Sanity dataset")
    sanity_token:       Optional[str] = Field(default=None, description="Sanity API token with write access")
    sanity_api_version: str = Field(default="2024-01-01", description="Sanity HTTP API version")
    storage_dir:    str = Field(default="storage/markdown", description="Directory for scraped Markdown files")
    host:           str = "0.0.0.0"
    port:           int = Field(default=7777, ge=1, le=65535)
    log_level:      str = Field(default="info", description="debug, info, warning or error")
    request_timeout: Optional[float] = Field(default=None, gt=0, description="Seconds; None waits indefinitely")

    @property
    def has_llm(self) -> bool:
        return bool(self.openai_api_key.strip())

    @property
    def has_cms(self) -> bool:
        return bool(self.sanity_project_id and self.sanity_token)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then SEOPUB_<FIELD> env vars, then non-None CLI overrides."""
    load_dotenv(find_dotenv(usecwd=True))
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        alias = ENV_ALIASES.get(name)
        if alias and (val := os.getenv(alias)):
            data[name] = val
        if val := os.getenv(f"SEOPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
