"""Runtime settings read from WORDTILES_* environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from wordtiles.core.levels import DEFAULT_LEVELS_DIR


@dataclass(frozen=True)
class Settings:
    levels_dir: Path = DEFAULT_LEVELS_DIR
    speech_enabled: bool = True
    speech_locale: str = "en_US"
    seed: Optional[int] = None
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        levels_dir = DEFAULT_LEVELS_DIR
        raw_dir = env.get("WORDTILES_LEVELS_DIR", "").strip()
        if raw_dir:
            levels_dir = Path(raw_dir).expanduser()

        speech_enabled = env.get("WORDTILES_SPEECH", "1").strip() != "0"
        speech_locale = env.get("WORDTILES_SPEECH_LOCALE", "").strip() or "en_US"

        seed: Optional[int] = None
        raw_seed = env.get("WORDTILES_SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"WORDTILES_SEED must be an integer, got {raw_seed!r}") from None

        level_name = env.get("WORDTILES_LOG_LEVEL", "").strip().upper() or "INFO"
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"WORDTILES_LOG_LEVEL is not a logging level: {level_name!r}")

        return cls(
            levels_dir=levels_dir,
            speech_enabled=speech_enabled,
            speech_locale=speech_locale,
            seed=seed,
            log_level=log_level,
        )
