from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuildConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
