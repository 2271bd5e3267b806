"""Basic configseek usage.

Finds the nearest linter config for a source file, parses it, and shows
that a second lookup is served from the cache.
"""

import asyncio

from configseek import ConfigLoader


CANDIDATES = ["linter.toml", ".linterrc.json", ".linterrc"]


async def main() -> None:
    with ConfigLoader() as loader:
        output = await loader.load(__file__, CANDIDATES)
        if output is None:
            print("No linter config applies to this file")
            return

        print(f"Config from {output.file_path}: {output.config}")

        # Same query again: answered from the cache, same object
        again = await loader.load(__file__, CANDIDATES)
        assert again is output


if __name__ == "__main__":
    asyncio.run(main())
