"""Configuration loading from environment variables and files."""

import json
import logging
import os
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class Settings(BaseModel):
    """Runtime configuration for a standalone connector run.

    Attributes:
        host: Lakehouse service host.
        port: Lakehouse service port.
        username: Echoed in the output.
        password: Collected but not sent anywhere.
        system_prompt: Optional system-level instruction.
        user_prompt: User question or instruction.
        continue_on_fail: Record item failures instead of aborting.
        remote_mode: "http" for the real request, "stub" for canned data.
        input_file_path: Optional JSON file with input items.
        items: Input items (populated from file).
    """

    host: str = Field(..., min_length=1, description="Lakehouse service host.")
    port: int = Field(default=8080, description="Lakehouse service port.")
    username: str = Field(default="", description="Username echoed in the output.")
    password: str = Field(default="", repr=False, description="Password (currently unused).")
    system_prompt: str = Field(default="", description="System prompt.")
    user_prompt: str = Field(..., min_length=1, description="User prompt.")
    continue_on_fail: bool = Field(
        default=False,
        description="Record failed items and keep going instead of aborting the batch.",
    )
    remote_mode: Literal["http", "stub"] = Field(
        default="http",
        description="Remote-call strategy: real HTTP request or canned stub response.",
    )
    input_file_path: str | None = Field(
        default=None,
        description="Optional path to JSON file containing input items.",
    )
    items: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Input items (populated from file).",
    )

    @field_validator("host", "user_prompt")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values.

        Args:
            v: Value to validate.

        Returns:
            The validated value.

        Raises:
            ValueError: If the value is blank.
        """
        if not v.strip():
            raise ValueError("Must not be blank")
        return v

    def load_items(self) -> None:
        """Load and validate input items from JSON file, if configured.

        Raises:
            ValueError: If file not found, invalid JSON or wrong format.
        """
        if not self.input_file_path:
            return
        try:
            with open(self.input_file_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ValueError(f"Input file not found: {self.input_file_path}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Input file contains invalid JSON: {self.input_file_path}") from e

        if not isinstance(data, list):
            raise ValueError("Input file must be a JSON array")
        if not all(isinstance(x, dict) for x in data):
            raise ValueError("Each input item must be a JSON object")

        self.items = data
        logger.debug(f"Loaded {len(data)} input items from {self.input_file_path}")

    def to_parameters(self) -> dict[str, Any]:
        """Return node parameters keyed by host parameter name."""
        return {
            "host": self.host,
            "port": self.port,
            "username": self.username,
            "password": self.password,
            "system_prompt": self.system_prompt,
            "user_prompt": self.user_prompt,
        }


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean (got: {raw})")


def load_settings() -> Settings:
    """Load and validate settings from environment and files.

    Required environment variables:
    - CONNECTOR_HOST: Lakehouse service host.
    - CONNECTOR_USER_PROMPT: User prompt.

    Optional:
    - CONNECTOR_PORT: Integer port (default 8080).
    - CONNECTOR_USERNAME, CONNECTOR_PASSWORD, CONNECTOR_SYSTEM_PROMPT.
    - CONNECTOR_CONTINUE_ON_FAIL: Boolean flag (default false).
    - CONNECTOR_REMOTE_MODE: "http" or "stub" (default http).
    - CONNECTOR_INPUT_FILE: Path to JSON array of input items.

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If required env vars missing or malformed.
        ValueError: If configuration is invalid.
    """
    try:
        host = os.environ["CONNECTOR_HOST"]
        user_prompt = os.environ["CONNECTOR_USER_PROMPT"]
    except KeyError as e:
        raise RuntimeError(f"Missing required environment variable: {e.args[0]}") from e

    port_raw = os.getenv("CONNECTOR_PORT", "8080")
    try:
        port = int(port_raw)
    except ValueError as e:
        raise RuntimeError(f"CONNECTOR_PORT must be an integer (got: {port_raw})") from e

    settings = Settings(
        host=host,
        port=port,
        username=os.getenv("CONNECTOR_USERNAME", ""),
        password=os.getenv("CONNECTOR_PASSWORD", ""),
        system_prompt=os.getenv("CONNECTOR_SYSTEM_PROMPT", ""),
        user_prompt=user_prompt,
        continue_on_fail=_parse_bool(
            "CONNECTOR_CONTINUE_ON_FAIL", os.getenv("CONNECTOR_CONTINUE_ON_FAIL", "false")
        ),
        remote_mode=os.getenv("CONNECTOR_REMOTE_MODE", "http").strip().lower(),
        input_file_path=os.getenv("CONNECTOR_INPUT_FILE") or None,
    )

    settings.load_items()

    logger.info(
        f"Connector configured: host={settings.host}, port={settings.port}, "
        f"user={settings.username or '<none>'}, mode={settings.remote_mode}, "
        f"continue_on_fail={settings.continue_on_fail}, items={len(settings.items)}"
    )

    return settings
