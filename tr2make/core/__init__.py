# SPDX-License-Identifier: MIT
"""Core configuration, build plan and error types."""
