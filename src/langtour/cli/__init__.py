"""CLI package.

The ``cli`` sub-package contains the Click application and all command
implementations.  Commands go through the public registry and runner
APIs rather than calling demo modules directly.
"""
from __future__ import annotations
