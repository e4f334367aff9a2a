# SPDX-License-Identifier: MIT
"""Custom exceptions for tr2make.

All tr2make exceptions inherit from Tr2MakeError, which includes
an optional file path for better error messages.
"""

from __future__ import annotations

from pathlib import Path


class Tr2MakeError(Exception):
    """Base class for all tr2make exceptions.

    Attributes:
        message: The error message.
        path: Optional file the error relates to.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigError(Tr2MakeError):
    """Error loading the project configuration.

    Raised when the configuration file is missing, unreadable,
    or does not match the expected schema.
    """


class UnsupportedLanguageError(Tr2MakeError):
    """Configured language has no known toolchain.

    Attributes:
        language: The language value from the configuration.
    """

    def __init__(
        self,
        language: str,
        path: Path | str | None = None,
    ) -> None:
        self.language = language
        super().__init__(f"unsupported language: {language}", path)


class NoSourceFilesError(Tr2MakeError):
    """No configured source file matches the language extension.

    Attributes:
        extension: The source extension that was searched for.
    """

    def __init__(
        self,
        extension: str,
        path: Path | str | None = None,
    ) -> None:
        self.extension = extension
        super().__init__(f"No valid {extension} files found", path)


class GenerateError(Tr2MakeError):
    """Error during the generate phase.

    Raised when the output directory or build file cannot be written.
    """
