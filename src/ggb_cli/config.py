import logging
import tomllib
from pathlib import Path

from ggb_linter import LintConfig
from ggb_linter.api import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".ggb-lint.toml"


def load_config(config_path: Path | None = None) -> LintConfig:
    """Load ``[tool.ggb-lint]`` from a TOML file on top of the default rule levels.

    A missing or unreadable file yields the defaults. Invalid rule levels
    raise ``pydantic.ValidationError``.
    """
    if config_path is None or not config_path.exists():
        return DEFAULT_CONFIG

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring config file %s: %s", config_path, e)
        return DEFAULT_CONFIG

    lint_data = data.get("tool", {}).get("ggb-lint", {})
    rules = dict(DEFAULT_CONFIG.rules)
    rules.update(lint_data.get("rules", {}))
    logger.debug("Loaded %d rule setting(s) from %s", len(rules), config_path)
    return LintConfig(rules=rules)
