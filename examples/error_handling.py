"""Error handling patterns with recovery hints.

This example demonstrates the three outcomes of a lookup: a config, None
(nothing usable found), or an exception with a recovery_hint.
"""

import asyncio
from pathlib import Path

from configseek import (
    ConfigLoader,
    ConfigModuleError,
    ConfigOutput,
    ConfigParseError,
    # Exceptions
    ConfigseekError,
)


CANDIDATES = ["tool.toml", "tool_config.py", ".toolrc"]

loader = ConfigLoader()


# Pattern 1: Report malformed config files with their location
async def load_or_report(source: Path) -> ConfigOutput | None:
    """Load config, printing where a broken config file needs fixing."""
    try:
        return await loader.load(source, CANDIDATES)
    except ConfigParseError as e:
        print(f"Broken config: {e.path}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Fall back to defaults when nothing applies
async def load_with_defaults(source: Path, defaults: dict) -> dict:
    """Return the found config merged over defaults."""
    output = await loader.load(source, CANDIDATES)
    if output is None:
        return dict(defaults)
    return {**defaults, **output.config}


# Pattern 3: Catch-all for any library error
async def load_safe(source: Path) -> ConfigOutput | None:
    """Load config with comprehensive error handling."""
    try:
        return await loader.load(source, CANDIDATES)
    except ConfigModuleError as e:
        print(f"Config module failed: {e.path}")
        print(f"Hint: {e.recovery_hint}")
        return None
    except ConfigseekError as e:
        # Catch any other library errors
        print(f"Unexpected error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None
    except PermissionError as e:
        print(f"Cannot read config: {e.filename}")
        return None


# Example usage
if __name__ == "__main__":
    print(asyncio.run(load_safe(Path(__file__))))
