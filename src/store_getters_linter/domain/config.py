"""Configuration loader for linter settings."""

import logging

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Holds the store-getters settings read from pyproject.toml.

    The only setting is `enable-fix` (bool, default False): whether
    diagnostics carry an autofix.
    """

    def __init__(self, config: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        unknown = sorted(set(self._config) - {"enable-fix", "enable_fix"})
        if unknown:
            logger.warning("Unknown [tool.store-getters] options ignored: %s", ", ".join(unknown))

    @property
    def config(self) -> dict[str, object]:
        return self._config

    @property
    def enable_fix(self) -> bool:
        value = self._config.get("enable-fix", self._config.get("enable_fix", False))
        if not isinstance(value, bool):
            logger.warning("[tool.store-getters] enable-fix must be a boolean, got %r", value)
            return False
        return value
