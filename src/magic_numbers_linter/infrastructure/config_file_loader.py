"""Load [tool.no-magic-numbers] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from magic_numbers_linter.domain.constants import TOOL_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from pyproject.toml."""

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> dict[str, object]:
        """Load [tool.no-magic-numbers] from the nearest pyproject.toml.

        Walks up from ``start`` (default: CWD). A pyproject.toml without the
        section still ends the search and yields an empty config.
        """
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Skipping unreadable %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_SECTION, {}) or {}
            if not isinstance(config_dict, dict):
                logger.warning("[tool.%s] in %s is not a table; ignored.", TOOL_SECTION, config_file)
                config_dict = {}
            return config_dict
        return {}
