"""Load [tool.store-getters] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

TOOL_SECTION: str = "store-getters"


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml above the working directory."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.store-getters] table, or {} when there is none."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Ignoring unreadable %s: %s", config_file, exc)
                return empty
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(TOOL_SECTION, {}) or {}
            logger.debug("Loaded [tool.%s] from %s", TOOL_SECTION, config_file)
            return dict(section) if isinstance(section, dict) else empty
        return empty
