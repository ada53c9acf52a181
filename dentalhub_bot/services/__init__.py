"""Business logic services module."""

import importlib as _importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bot import BookingFlow as BookingFlow
    from .bot import BrowserSession as BrowserSession
    from .bot import run_booking as run_booking
    from .intake import ConsolePrompter as ConsolePrompter
    from .intake import IntakeService as IntakeService

_LAZY_MODULE_MAP = {
    "BookingFlow": ("dentalhub_bot.services.bot", "BookingFlow"),
    "BrowserSession": ("dentalhub_bot.services.bot", "BrowserSession"),
    "run_booking": ("dentalhub_bot.services.bot", "run_booking"),
    "ConsolePrompter": ("dentalhub_bot.services.intake", "ConsolePrompter"),
    "IntakeService": ("dentalhub_bot.services.intake", "IntakeService"),
}

__all__ = list(_LAZY_MODULE_MAP.keys())


def __getattr__(name: str):
    """Lazy import with explicit mapping - importlib based."""
    if name in _LAZY_MODULE_MAP:
        module_path, attr_name = _LAZY_MODULE_MAP[name]
        module = _importlib.import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
