# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/config.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Literal, Final

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from nfd2nfc.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "nfd2nfc.yml"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so environment overrides set by tests are honored.
    """
    return (
        Path("/etc/nfd2nfc") / USER_CFG,  # System defaults
        Path.home() / ".config" / "nfd2nfc" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "nfd2nfc" / USER_CFG,  # XDG override
        Path(os.getenv("NFD2NFC_CONFIG_HOME", "")) / USER_CFG,  # Explicit override
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge YAML config data from candidate paths.

    Later candidates override earlier ones. Files that fail to parse are
    skipped with a warning. Returns an empty dict when nothing is found.
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        # Unset env vars collapse to a relative path; skip those
        if not candidate.is_absolute() or not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")
            merged_data.update(data)
            found_configs.append(str(candidate))
            logger.debug(f"Loaded config from {candidate}")
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    return merged_data


class UserConfig(BaseModel):
    """Per-user settings from nfd2nfc.yml."""
    local_log: Optional[Path] = None
    console_log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("console_log_level", mode="before")
    @classmethod
    def upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_merged_user_config() -> UserConfig:
    """Load user config merged across all search paths, or the defaults."""
    return UserConfig.model_validate(_load_merged_config_data(_get_user_config_search_paths()))


class RunConfig(BaseModel):
    """Settings for one invocation, threaded through walker and renamer."""
    model_config = ConfigDict(frozen=True)

    directory: Path
    recursive: bool = False
    dry_run: bool = False
    max_depth: Optional[int] = Field(default=None, ge=1)

    @property
    def depth_limit(self) -> Optional[int]:
        """Deepest level to visit, None for unlimited."""
        if not self.recursive:
            return 1
        return self.max_depth


def build_run_config(
    directory: Optional[Path] = None,
    recursive: bool = False,
    dry_run: bool = False,
    max_depth: Optional[int] = None,
) -> RunConfig:
    """Validate command line settings and build the run configuration.

    Args:
        directory: Root to process, current working directory when None
        recursive: Descend into subdirectories
        dry_run: Report renames without performing them
        max_depth: Deepest level to visit; implies recursive

    Raises:
        ConfigError: If the root is missing or not a directory, or
            max_depth is not positive
    """
    root = Path.cwd() if directory is None else Path(directory)

    if max_depth is not None:
        if max_depth < 1:
            raise ConfigError(f"--max-depth must be at least 1, got {max_depth}")
        recursive = True

    if not root.exists():
        raise ConfigError(f"Directory does not exist: {root}", path=root)
    if not root.is_dir():
        raise ConfigError(f"Not a directory: {root}", path=root)
    if not os.access(root, os.R_OK | os.X_OK):
        raise ConfigError(f"Directory is not readable: {root}", path=root)

    return RunConfig(
        directory=root,
        recursive=recursive,
        dry_run=dry_run,
        max_depth=max_depth,
    )
