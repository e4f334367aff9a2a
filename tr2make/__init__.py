# SPDX-License-Identifier: MIT
"""
Tr2Make: generates Makefiles for small C and C++ projects.

A project is described by a ``.tr2make`` YAML file; tr2make turns it into
``build/<model>-<architecture>/Makefile`` for gcc or g++.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export commonly used classes for convenient imports
from tr2make.core.config import BuildModel, ProjectConfig, load_config  # noqa: E402
from tr2make.core.errors import Tr2MakeError  # noqa: E402
from tr2make.core.plan import BuildPlan, derive_plan  # noqa: E402
from tr2make.generators.makefile import MakefileGenerator  # noqa: E402

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Configuration
    "BuildModel",
    "ProjectConfig",
    "load_config",
    # Derivation
    "BuildPlan",
    "derive_plan",
    # Generators
    "MakefileGenerator",
    # Errors
    "Tr2MakeError",
]
