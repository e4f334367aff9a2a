# SPDX-License-Identifier: MIT
"""GNU Makefile generator.

Renders a BuildPlan into a Makefile with a fixed rule layout:

    all: create_dirs $(TARGET)      default goal
    $(TARGET): $(OBJ)               link
    $(OBJ_DIR)/%.o: %<ext>          compile one source
    create_dirs:                    create the object directory
    clean:                          remove objects and the binary

Rule names are a compatibility contract with scripts driving the
generated Makefile; MAKEFILE_FORMAT_VERSION changes when they do.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from tr2make.core.errors import GenerateError
from tr2make.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from tr2make.core.plan import BuildPlan

logger = logging.getLogger(__name__)

MAKEFILE_FORMAT_VERSION = 1

MAKEFILE_NAME = "Makefile"

MAKEFILE_TEMPLATE = """\
# {lang} Project Makefile
CC := {compiler}
SRC := {sources}
TARGET := {target_path}
STD := {std}
ARCH := {arch}
DEBUG := {debug}

OBJ_DIR := {obj_dir}
OBJ := $(addprefix $(OBJ_DIR)/, $(SRC:{ext}=.o))

CFLAGS := {optimization} -std=$(STD) {arch_flag}
LDFLAGS := {arch_flag}

all: create_dirs $(TARGET)

$(TARGET): $(OBJ)
\t$(CC) $^ -o $@ $(LDFLAGS)

$(OBJ_DIR)/%.o: %{ext}
\t{mkdir_cmd}
\t$(CC) $(CFLAGS) -c $< -o $@

create_dirs:
\t{mkdir_cmd}

clean:
\t{clean_cmd}

.PHONY: all clean create_dirs
"""


class MakefileGenerator(BaseGenerator):
    """Generator that produces a GNU Makefile.

    Usage:
        plan = derive_plan(config, BuildModel.DEBUG)
        generator = MakefileGenerator()
        path = generator.generate(plan, plan.output_dir)
        # Creates build/debug-<arch>/Makefile
    """

    def __init__(self, *, output_filename: str = MAKEFILE_NAME) -> None:
        """Initialize the Makefile generator.

        Args:
            output_filename: Name of the output file.
        """
        super().__init__("make")
        self._output_filename = output_filename

    def render(self, plan: BuildPlan) -> str:
        """Return the Makefile text for a plan."""
        return MAKEFILE_TEMPLATE.format(
            lang=plan.language.value.upper(),
            compiler=plan.compiler,
            sources=" ".join(plan.sources),
            target_path=plan.target_path,
            std=plan.std,
            arch=plan.architecture,
            debug=plan.debug,
            obj_dir=plan.obj_dir,
            ext=plan.extension,
            optimization=plan.optimization,
            arch_flag=plan.arch_flag,
            mkdir_cmd=plan.mkdir_cmd,
            clean_cmd=plan.clean_cmd,
        )

    def generate(self, plan: BuildPlan, output_dir: Path) -> Path:
        """Write the Makefile for a plan.

        Args:
            plan: The derived build plan.
            output_dir: Directory to write the Makefile to; created if needed.

        Returns:
            Path of the written Makefile.

        Raises:
            GenerateError: If the directory or file cannot be written.
        """
        content = self.render(plan)
        output_file = output_dir / self._output_filename

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            # Keep '\n' on every host so repeated runs are byte-identical
            with open(output_file, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise GenerateError(f"cannot write build file: {e}", output_file) from e

        logger.info("Wrote %s", output_file)
        return output_file
