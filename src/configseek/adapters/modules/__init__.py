"""Code-module config adapters."""

from configseek.adapters.modules.python_module import PythonModuleLoader


__all__ = ["PythonModuleLoader"]
