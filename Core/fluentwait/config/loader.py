from __future__ import annotations

import logging
import os
from pathlib import Path

from fluentwait.config.schema import WaitConfig

_LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FLUENTWAIT_CONFIG"


class ConfigLoader:
    """Resolves the wait configuration file and validates it with pydantic."""

    @staticmethod
    def resolve_path(path: str | Path | None = None) -> Path | None:
        override = os.getenv(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path(path) if path is not None else None

    @classmethod
    def load(cls, path: str | Path | None = None) -> WaitConfig:
        config_path = cls.resolve_path(path)
        if config_path is None:
            _LOGGER.debug("no wait config given, using defaults")
            return WaitConfig()
        _LOGGER.debug("loading wait config from %s", config_path)
        return WaitConfig.model_validate_json(config_path.read_text(encoding="utf-8"))
