"""Package-wide defaults for configseek.

These values are read once at import time. Per-call behaviour is
controlled through ConfigOptions instead.
"""

from __future__ import annotations


# Capacity of the LRU cache that holds loaded configuration outputs
DEFAULT_CACHE_SIZE = 500

# Extensions (without the dot) that are executed instead of parsed
CODE_MODULE_EXTENSIONS = frozenset({"py"})

# Module attribute holding the exported value of a code-module config
MODULE_EXPORT_NAME = "config"

# Directory name marking a package boundary; search stops when it is reached
MODULE_BOUNDARY_DIRNAME = "node_modules"
