"""
Configuration for the restvpn client, read once from the environment
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_ADDR = "http://localhost:5000"

ADDR_VAR = "RESTVPN_ADDR"
KEY_VAR = "RESTVPN_KEY"
DEBUG_VAR = "RESTVPN_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    api_addr: str = DEFAULT_API_ADDR
    api_key: str = ""
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build configuration from environment variables"""
        if environ is None:
            environ = os.environ
        return cls(
            api_addr=environ.get(ADDR_VAR) or DEFAULT_API_ADDR,
            api_key=environ.get(KEY_VAR) or "",
            debug=environ.get(DEBUG_VAR, "").strip().lower() in _TRUTHY,
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_env_file() -> bool:
    """Load a .env file from the working directory upwards, if there is one.

    Variables already present in the process environment are left alone.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path, override=False)
