"""Python module adapter implementing ModuleLoaderPort.

Executes ``.py`` config files and extracts their exported value.
"""

from __future__ import annotations

import importlib.util
import inspect
import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING, Any

from configseek.core.exceptions import ConfigModuleError
from configseek.settings import MODULE_EXPORT_NAME


if TYPE_CHECKING:
    from pathlib import PurePath
    from types import ModuleType


def _error_line(error: BaseException, path: Path) -> int | None:
    """Find the line of path where error was raised, if any."""
    if isinstance(error, SyntaxError) and error.lineno is not None:
        return error.lineno
    for frame in reversed(traceback.extract_tb(error.__traceback__)):
        if Path(frame.filename) == path:
            return frame.lineno
    return None


def module_export(module: ModuleType) -> Any:
    """Return the value exported by a config module.

    The module's ``config`` attribute is the export when defined. Otherwise
    the export is a dict of the module's public globals, leaving out
    imported modules, functions and classes.
    """
    if hasattr(module, MODULE_EXPORT_NAME):
        return getattr(module, MODULE_EXPORT_NAME)

    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_")
        and not inspect.ismodule(value)
        and not inspect.isfunction(value)
        and not inspect.isclass(value)
    }


class PythonModuleLoader:
    """Loads code-module configs by executing Python files.

    Each load executes the file afresh under a unique module name, which is
    removed from sys.modules afterwards, so edits are picked up and nothing
    leaks into the import system.
    """

    def load(self, path: PurePath) -> Any:
        """Execute the config module at path and return its export.

        Args:
            path: Path to the Python config file.

        Returns:
            The module's exported value (see module_export()).

        Raises:
            FileNotFoundError: If path does not exist.
            ModuleNotFoundError: If the module imports a missing module.
            ConfigModuleError: If the module fails to compile or raises.
        """
        path = Path(path)
        # Generate a unique module name to avoid conflicts
        module_name = f"_configseek_config_{path.stem}_{id(path)}"

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ConfigModuleError(f"Could not load config module {path}", path=path)

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module

        try:
            spec.loader.exec_module(module)
        except (OSError, ModuleNotFoundError):
            raise
        except Exception as e:
            raise ConfigModuleError(
                f"Error executing config module {path}: {e}",
                path=path,
                line=_error_line(e, path),
                cause=e,
            ) from e
        finally:
            # Clean up to avoid polluting sys.modules
            sys.modules.pop(module_name, None)

        return module_export(module)
