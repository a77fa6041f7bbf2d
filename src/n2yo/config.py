"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .api.uri import BASE_URL


@dataclass
class N2YOConfig:
    """Settings for an ``N2YOClient``.

    Attributes:
        api_key: N2YO API key (https://www.n2yo.com/login/edit/)
        base_url: REST root the request segments are appended to
        timeout: HTTP timeout in seconds
        transaction_warning_threshold: Transaction count above which a
            warning is logged (N2YO allows 1000 per hour)
    """
    api_key: str = ""
    base_url: str = BASE_URL
    timeout: float = 30
    transaction_warning_threshold: int = 900

    @classmethod
    def from_env(cls, **kwargs) -> N2YOConfig:
        """Create config from environment variables.

        Environment variables:
            N2YO_API_KEY: API key
            N2YO_BASE_URL: REST root override
            N2YO_TIMEOUT: HTTP timeout in seconds

        Keyword arguments take precedence over the environment.
        """
        env: dict = {"api_key": os.getenv("N2YO_API_KEY", "")}
        if os.getenv("N2YO_BASE_URL"):
            env["base_url"] = os.environ["N2YO_BASE_URL"]
        if os.getenv("N2YO_TIMEOUT"):
            env["timeout"] = float(os.environ["N2YO_TIMEOUT"])
        env.update(kwargs)
        return cls(**env)
