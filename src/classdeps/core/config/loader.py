"""YAML configuration file reader."""

from pathlib import Path
from typing import Any

import yaml

from classdeps.core.exceptions.errors import ConfigurationError

# Top-level sections consumed by Settings.from_yaml.
KNOWN_SECTIONS = ("analysis", "logging")


class ConfigLoader:
    """Reads a classdeps YAML file and hands out its sections.

    A file is a mapping of section name to mapping, e.g.::

        analysis:
          max_workers: 8
          excluded_dirs: [.git, target]
        logging:
          level: INFO

    Unknown sections are kept but never consulted.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the loader.

        Args:
            config_path: YAML file read by load() when no path is passed.
        """
        self.config_path = config_path
        self._config: dict[str, Any] = {}

    def load(self, path: Path | None = None) -> dict[str, Any]:
        """Read and validate a configuration file.

        An empty file is an empty configuration. ``analysis`` and
        ``logging`` must be mappings when present.

        Args:
            path: File to read instead of ``config_path``.

        Returns:
            The parsed top-level mapping ({} when there is no path at all).

        Raises:
            ConfigurationError: If the file is unreadable, is not valid YAML,
                or does not have the section layout shown above.
        """
        load_path = path or self.config_path
        if not load_path:
            return {}

        try:
            text = Path(load_path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {load_path}",
                config_key=str(load_path),
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {load_path}: {e.strerror or e}",
                config_key=str(load_path),
            ) from e

        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            details = {"line": mark.line + 1} if mark is not None else {"error": str(e)}
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {load_path}",
                config_key=str(load_path),
                details=details,
            ) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {load_path}",
                config_key=str(load_path),
            )

        for section in KNOWN_SECTIONS:
            value = loaded.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(
                    f"Section '{section}' in {load_path} must be a mapping, "
                    f"got {type(value).__name__}",
                    config_key=section,
                )

        self._config = loaded
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by dotted path, e.g. ``analysis.max_workers``.

        Args:
            key: Dotted key.
            default: Returned when any part of the path is missing.

        Returns:
            The value at the path, or default.
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_section(self, section: str) -> dict[str, Any]:
        """Get one section as keyword arguments for a settings model.

        A missing or empty (``analysis:``) section yields {}.
        """
        return dict(self._config.get(section) or {})
