# SPDX-License-Identifier: MIT
"""Host platform detection.

The generated Makefile uses shell commands of the machine tr2make runs
on; there is no notion of a separate target platform.
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ShellCommands:
    """Shell fragments embedded in Makefile recipes.

    Attributes:
        clean: Recipe removing objects and the binary.
        mkdir: Recipe creating the object directory if missing.
    """

    clean: str
    mkdir: str


POSIX_SHELL = ShellCommands(
    clean="rm -f $(OBJ) $(TARGET)",
    mkdir="@mkdir -p $(OBJ_DIR)",
)

WINDOWS_SHELL = ShellCommands(
    clean="del /Q $(OBJ) $(TARGET)",
    mkdir='@if not exist "$(OBJ_DIR)" mkdir "$(OBJ_DIR)"',
)

# Keyed by Platform.os; anything not listed uses POSIX_SHELL.
SHELL_COMMANDS: dict[str, ShellCommands] = {
    "windows": WINDOWS_SHELL,
}


@dataclass(frozen=True)
class Platform:
    """Information about the host platform.

    Attributes:
        os: Lowercase OS name ('linux', 'darwin', 'windows', ...).
        exe_suffix: Suffix appended to program names.
    """

    os: str
    exe_suffix: str

    @property
    def shell(self) -> ShellCommands:
        """Shell fragments for this platform."""
        return SHELL_COMMANDS.get(self.os, POSIX_SHELL)

    def program_name(self, name: str) -> str:
        """Return the filename of a program called ``name``."""
        return f"{name}{self.exe_suffix}"


@lru_cache(maxsize=1)
def get_platform() -> Platform:
    """Detect the platform tr2make is running on."""
    os_name = _platform.system().lower()
    return Platform(
        os=os_name,
        exe_suffix=".exe" if os_name == "windows" else "",
    )
