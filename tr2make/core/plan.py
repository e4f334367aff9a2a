# SPDX-License-Identifier: MIT
"""Derived build plan.

A BuildPlan holds every value substituted into the generated Makefile.
It is computed from a ProjectConfig and a BuildModel, handed to a
generator and then discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tr2make.configure.platform import Platform, get_platform
from tr2make.core.config import BuildModel, ProjectConfig
from tr2make.core.errors import NoSourceFilesError
from tr2make.toolchains.gcc import Language, arch_flag, filter_sources, model_flags

logger = logging.getLogger(__name__)

DEFAULT_BUILD_ROOT = "build"


@dataclass(frozen=True)
class BuildPlan:
    """Compiler and linker parameters for one invocation.

    Attributes:
        language: Source language.
        model: Selected build mode.
        compiler: Compiler executable name.
        extension: Source file extension.
        std: Value of the ``-std=`` flag (e.g. "c17").
        sources: Source files to compile, in configured order.
        target: Binary filename, including the platform suffix.
        architecture: Architecture identifier as configured.
        arch_flag: Compiler/linker architecture flag.
        optimization: Mode-dependent compile flags.
        debug: "1" for debug builds, "0" for release builds.
        build_dir: Output directory, '/'-separated.
        clean_cmd: Shell command for the clean rule.
        mkdir_cmd: Shell command creating the object directory.
    """

    language: Language
    model: BuildModel
    compiler: str
    extension: str
    std: str
    sources: tuple[str, ...]
    target: str
    architecture: str
    arch_flag: str
    optimization: str
    debug: str
    build_dir: str
    clean_cmd: str
    mkdir_cmd: str

    @property
    def obj_dir(self) -> str:
        return f"{self.build_dir}/obj"

    @property
    def target_path(self) -> str:
        return f"{self.build_dir}/{self.target}"

    @property
    def output_dir(self) -> Path:
        """Directory the build file is written to."""
        return Path(self.build_dir)


def derive_plan(
    config: ProjectConfig,
    model: BuildModel,
    platform: Platform | None = None,
    build_root: str = DEFAULT_BUILD_ROOT,
) -> BuildPlan:
    """Compute the build plan for a project and build mode.

    Nothing is written to disk; all validation happens here so a failed
    derivation leaves no output behind.

    Args:
        config: The loaded project configuration.
        model: Build mode to generate for.
        platform: Host platform (default: the running platform).
        build_root: Directory under which per-mode build directories live.

    Returns:
        The derived build plan.

    Raises:
        UnsupportedLanguageError: If the language is not C or C++.
        NoSourceFilesError: If no file has the language's extension.
        ConfigError: If the configuration has no entry for ``model``.
    """
    if platform is None:
        platform = get_platform()

    language = Language.parse(config.language)

    sources = filter_sources(config.files, language)
    if not sources:
        raise NoSourceFilesError(language.extension)
    skipped = len(config.files) - len(sources)
    if skipped:
        logger.info(
            "Ignoring %d file(s) without %s extension", skipped, language.extension
        )

    model_config = config.model_config(model)
    logger.debug("Model %s: targetdir=%s", model, model_config.targetdir)

    flags = model_flags(model)
    shell = platform.shell

    return BuildPlan(
        language=language,
        model=model,
        compiler=language.compiler,
        extension=language.extension,
        std=language.std_flag_value(config.standard),
        sources=sources,
        target=platform.program_name(config.target),
        architecture=config.architecture,
        arch_flag=arch_flag(config.architecture),
        optimization=flags.optimization,
        debug=flags.debug,
        build_dir=f"{build_root}/{model}-{config.architecture}",
        clean_cmd=shell.clean,
        mkdir_cmd=shell.mkdir,
    )
