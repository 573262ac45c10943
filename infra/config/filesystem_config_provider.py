from __future__ import annotations

import json
import re
from pathlib import Path

from domain.models import AppConfig
from infra.http import DEFAULT_BASE_URL


class ConfigError(ValueError):
    """Raised when config.json cannot be turned into an ``AppConfig``."""


_REQUIRED_CONFIG_KEYS = {"userEmail"}
_KNOWN_CONFIG_KEYS = {"baseUrl", "userEmail"}
_PLACEHOLDER_EMAILS = {"your@email.com", "you@example.com"}
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FileSystemConfigProvider:
    """Reads config.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self._config_dir / "config.json"

    def validate(self) -> list[str]:
        errors: list[str] = []
        data = self._validate_json_file(self.config_path, _REQUIRED_CONFIG_KEYS, errors)
        if data is not None:
            errors.extend(self._validate_config_formats(data))
        return errors

    @staticmethod
    def _validate_config_formats(data: dict) -> list[str]:
        errors: list[str] = []
        unknown = set(data.keys()) - _KNOWN_CONFIG_KEYS
        if unknown:
            errors.append(f"config.json has unknown keys: {', '.join(sorted(unknown))}")

        base_url = data.get("baseUrl", DEFAULT_BASE_URL)
        if not isinstance(base_url, str) or not base_url.startswith(("http://", "https://")):
            errors.append("baseUrl must start with 'http://' or 'https://'.")

        email = data.get("userEmail", "")
        if not isinstance(email, str) or not _EMAIL_PATTERN.match(email.strip()):
            errors.append(f"config.json: userEmail '{email}' is not a valid email address.")
        elif email.strip() in _PLACEHOLDER_EMAILS:
            errors.append("config.json: userEmail is a placeholder. Enter the email you registered with.")

        return errors

    def get_config(self) -> AppConfig:
        try:
            data = self._read_json()
        except (json.JSONDecodeError, OSError) as exc:
            raise ConfigError(f"Cannot read {self.config_path}: {exc}") from exc
        if not isinstance(data, dict) or "userEmail" not in data:
            raise ConfigError(f"{self.config_path.name} missing keys: userEmail")
        return AppConfig(
            base_url=str(data.get("baseUrl") or DEFAULT_BASE_URL),
            user_email=str(data["userEmail"]).strip(),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self) -> dict:
        return json.loads(self.config_path.read_text(encoding="utf-8"))

    @staticmethod
    def _validate_json_file(
        path: Path,
        required_keys: set[str],
        errors: list[str],
    ) -> dict | None:
        """Validate a JSON file exists and has required keys.

        Returns the parsed dict on success, or None if the file
        is missing or unparseable.
        """
        if not path.is_file():
            errors.append(f"Missing file: {path}")
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object")
            return None
        missing = required_keys - set(data.keys())
        if missing:
            errors.append(f"{path.name} missing keys: {', '.join(sorted(missing))}")
            return None
        return data
