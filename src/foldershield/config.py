"""
foldershield/config.py
──────────────────────
Startup settings. Built once by the CLI and never persisted.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field


def _probe_system() -> str:
    return platform.system()  # 'Darwin', 'Linux', 'Windows'


@dataclass(frozen=True)
class Settings:
    system: str = field(default_factory=_probe_system)
    verbose: bool = False

    @property
    def strategy(self) -> str:
        """``"attributes"`` on Windows, ``"rename"`` everywhere else."""
        return "attributes" if self.system == "Windows" else "rename"
