from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HelpexSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HELPEX_", extra="ignore")

    # Help document shipped next to the module
    help_path: Path = Field(default=Path("EWS-help.xml"))

    # Predictor identity as seen by the host
    predictor_id: str = Field(default="b6ac4d6f-d8d3-49ca-9891-1776f468e1fc")
    predictor_name: str = Field(default="EWSPredictors")
    predictor_description: str = Field(default="Predictions based on help examples")

    # If true, the help document is parsed on the first query instead of on activation.
    lazy_load: bool = Field(default=False)

    # Examples scanned between cancellation checks
    cancellation_check_interval: int = Field(default=256, ge=1)

    log_level: str = Field(default="INFO")

    # MCP transport options. Many MCP hosts use stdio; some support HTTP/SSE.
    mcp_transport: str = Field(default="stdio")  # "stdio" | "sse"
    mcp_host: str = Field(default="127.0.0.1")
    mcp_port: int = Field(default=8766)


def get_settings() -> HelpexSettings:
    return HelpexSettings()
