# SPDX-License-Identifier: MIT
"""Generator protocol for build file generation.

Generators take a derived BuildPlan and produce a build system file
(currently a GNU Makefile).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tr2make.core.plan import BuildPlan


@runtime_checkable
class Generator(Protocol):
    """Protocol for build file generators.

    A Generator takes a build plan and writes a build file to the
    output directory.
    """

    @property
    def name(self) -> str:
        """Generator name (e.g., 'make')."""
        ...

    def generate(self, plan: BuildPlan, output_dir: Path) -> Path:
        """Generate the build file for a plan.

        Args:
            plan: The derived build plan.
            output_dir: Directory to write the output file to.

        Returns:
            Path of the written file.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, plan: BuildPlan, output_dir: Path) -> Path:
        """Generate build files. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
