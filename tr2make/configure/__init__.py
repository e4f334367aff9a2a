# SPDX-License-Identifier: MIT
"""Host platform detection."""
