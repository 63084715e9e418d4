"""Configuration module for CIDR parsing."""

import os
import logging
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ipv4_cidr.network import IPv4Network

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class Config:
    """Application configuration."""

    def __init__(self, log_level: str = "INFO", strict: bool = False):
        self.log_level = log_level.upper()
        self.strict = strict

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Config":
        """Create configuration from environment variables.

        Reads LOG_LEVEL and CIDR_STRICT from the environment, after loading
        a .env file from the working directory (or its parents) when present.

        Raises:
            ValueError: If CIDR_STRICT is not a recognised boolean.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        log_level = os.getenv("LOG_LEVEL", "INFO")
        strict_raw = os.getenv("CIDR_STRICT", "").strip().lower()

        if strict_raw in _TRUE_VALUES:
            strict = True
        elif strict_raw in _FALSE_VALUES:
            strict = False
        else:
            raise ValueError(
                f"Invalid value for CIDR_STRICT: {strict_raw!r}\n"
                f"Expected one of: {', '.join(_TRUE_VALUES + _FALSE_VALUES[:-1])}."
            )

        return cls(log_level=log_level, strict=strict)

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def parse(self, text: str) -> IPv4Network:
        """Parse a CIDR string using the configured strictness."""
        return IPv4Network.parse(text, strict=self.strict)

    def try_parse(self, text: str) -> Optional[IPv4Network]:
        """Parse a CIDR string using the configured strictness, or return None."""
        return IPv4Network.try_parse(text, strict=self.strict)

    def __repr__(self) -> str:
        return f"Config(log_level={self.log_level!r}, strict={self.strict})"
