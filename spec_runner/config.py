"""Runner configuration file management.

Reads the JSON runner config that stores default reporting
options. Command-line flags take precedence over these values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "verbose": False,
    "name_filter": None,
    "yaml_output": None,
}


class RunnerConfig:
    """Manages the JSON runner configuration file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        if path is not None and path.exists():
            self._load()

    def _load(self) -> None:
        """Load config from the file."""
        assert self.path is not None
        try:
            text = self.path.read_text()
            data = json.loads(text)
            if isinstance(data, dict):
                self._data = {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError):
            self._data = dict(DEFAULT_CONFIG)

    @property
    def config(self) -> dict[str, Any]:
        """Get the full configuration dict."""
        return dict(self._data)

    @property
    def verbose(self) -> bool:
        return bool(self._data.get("verbose", DEFAULT_CONFIG["verbose"]))

    @property
    def name_filter(self) -> str | None:
        """Get the case name filter pattern (None = run everything)."""
        val = self._data.get("name_filter", DEFAULT_CONFIG["name_filter"])
        return str(val) if val is not None else None

    @property
    def yaml_output(self) -> Path | None:
        """Get the YAML report path (None = no YAML report)."""
        val = self._data.get("yaml_output", DEFAULT_CONFIG["yaml_output"])
        return Path(val) if val is not None else None

    def set_config(
        self,
        verbose: bool | None = None,
        name_filter: str | None = None,
        yaml_output: Path | None = None,
    ) -> None:
        """Update configuration values."""
        if verbose is not None:
            self._data["verbose"] = verbose
        if name_filter is not None:
            self._data["name_filter"] = name_filter
        if yaml_output is not None:
            self._data["yaml_output"] = str(yaml_output)
