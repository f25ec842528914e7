# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import init, inc, special, show, parse

__all__ = ["init", "inc", "special", "show", "parse"]
