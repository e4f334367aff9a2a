# SPDX-License-Identifier: MIT
"""Build file generators for tr2make."""

from tr2make.generators.generator import BaseGenerator, Generator
from tr2make.generators.makefile import MakefileGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "MakefileGenerator",
]
