"""Fixed runtime settings.

The scraper takes no configuration file, environment variables or CLI flags;
everything it needs lives here with its default value. Tests build their own
``Settings`` to redirect the snapshot directory or shorten timeouts.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    timeout: float = 30.0
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    out_dir: str = "output"
    snapshot_prefix: str = "cs_terms"
    timestamp_format: str = "%Y-%m-%d_%H-%M-%S"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.user_agent}


def get_settings() -> Settings:
    return Settings()
