# SPDX-License-Identifier: MIT
"""GCC toolchain rules.

Maps project settings onto GCC compiler invocations:
- C sources are compiled with gcc, C++ sources with g++
- the target architecture becomes an ``-m`` flag
- the build mode selects optimization and debug flags
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from tr2make.core.config import BuildModel
from tr2make.core.errors import UnsupportedLanguageError


@dataclass(frozen=True)
class LanguageInfo:
    """How a language is compiled.

    Attributes:
        extension: Source file suffix, including the dot.
        compiler: Compiler executable name.
        std_prefix: Prefix of the ``-std=`` value ("c" gives "c17").
    """

    extension: str
    compiler: str
    std_prefix: str


class Language(Enum):
    """Languages tr2make can build."""

    C = "c"
    CXX = "c++"

    @classmethod
    def parse(cls, name: str) -> Language:
        """Parse a configured language name.

        Raises:
            UnsupportedLanguageError: If the language is not C or C++.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedLanguageError(name) from None

    @property
    def info(self) -> LanguageInfo:
        return LANGUAGES[self]

    @property
    def extension(self) -> str:
        return self.info.extension

    @property
    def compiler(self) -> str:
        return self.info.compiler

    def std_flag_value(self, standard: int | float) -> str:
        """Return the ``-std=`` value, e.g. "c++17"."""
        return f"{self.info.std_prefix}{standard}"


LANGUAGES: dict[Language, LanguageInfo] = {
    Language.C: LanguageInfo(extension=".c", compiler="gcc", std_prefix="c"),
    Language.CXX: LanguageInfo(extension=".cpp", compiler="g++", std_prefix="c++"),
}

# Architectures with a dedicated -m flag; others pass through as -m<arch>.
ARCH_FLAGS: dict[str, str] = {
    "x64": "-m64",
    "x86": "-m32",
}


def arch_flag(architecture: str) -> str:
    """Return the compiler/linker flag selecting an architecture.

    Unknown names are not validated: "arm" becomes "-marm" and it is up
    to the compiler to accept it.
    """
    return ARCH_FLAGS.get(architecture, f"-m{architecture}")


@dataclass(frozen=True)
class ModelFlags:
    """Flags chosen by the build mode.

    Attributes:
        optimization: Optimization, debug-info and define flags.
        debug: "1" for debug builds, "0" otherwise.
    """

    optimization: str
    debug: str


MODEL_FLAGS: dict[BuildModel, ModelFlags] = {
    BuildModel.DEBUG: ModelFlags(optimization="-g -O0 -DDEBUG", debug="1"),
    BuildModel.RELEASE: ModelFlags(optimization="-O2", debug="0"),
}


def model_flags(model: BuildModel) -> ModelFlags:
    """Return the flags for a build mode."""
    return MODEL_FLAGS[model]


def filter_sources(files: Sequence[str], language: Language) -> tuple[str, ...]:
    """Keep the files compiled by ``language``, in configured order."""
    return tuple(f for f in files if f.endswith(language.extension))
