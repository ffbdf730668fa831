"""Pattern generators — one module per pattern, each registered via ``@generator``."""

from __future__ import annotations

import importlib
import pkgutil


def register_generators() -> None:
    """Import every generator module so the ``@generator`` decorators fire."""
    for _, module_name, _ in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{module_name}")
