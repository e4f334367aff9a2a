# SPDX-License-Identifier: MIT
"""Toolchain rules (GCC)."""

from tr2make.toolchains.gcc import (
    Language,
    LanguageInfo,
    ModelFlags,
    arch_flag,
    filter_sources,
    model_flags,
)

__all__ = [
    "Language",
    "LanguageInfo",
    "ModelFlags",
    "arch_flag",
    "filter_sources",
    "model_flags",
]
