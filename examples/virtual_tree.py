"""Resolving configs in a virtual tree.

MemoryFileSystem lets editors and tests look up configs for files that
only exist in memory. A package under node_modules never picks up the
project's config.
"""

from configseek import MemoryFileSystem, resolve_config_sync


fs = MemoryFileSystem()
fs.write_text("/repo/tool.toml", "strict = true")
fs.write_text("/repo/src/app/main.py", "")
fs.write_text("/repo/node_modules/dep/index.js", "")

print(resolve_config_sync(fs, "/repo/src/app/main.py", ["tool.toml"]))
# /repo/tool.toml

print(resolve_config_sync(fs, "/repo/node_modules/dep/index.js", ["tool.toml"]))
# None

print(resolve_config_sync(fs, "/repo/src/app/main.py", ["tool.toml"], root="/repo/src"))
# None
