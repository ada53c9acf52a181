"""DentalHub-Bot - Interactive DentalHub appointment booking."""

import importlib as _importlib
from typing import TYPE_CHECKING, Any

__version__ = "1.0.0"

if TYPE_CHECKING:
    from .core.config.config_loader import load_config as load_config
    from .core.logger import setup_structured_logging as setup_structured_logging
    from .services.bot import BookingFlow as BookingFlow
    from .services.bot import BrowserSession as BrowserSession
    from .services.bot import run_booking as run_booking
    from .services.intake import ConsolePrompter as ConsolePrompter
    from .services.intake import IntakeService as IntakeService

# Explicit lazy-loading map: name -> (module_path, attribute_name)
_LAZY_MODULE_MAP = {
    # Core
    "load_config": ("dentalhub_bot.core.config.config_loader", "load_config"),
    "setup_structured_logging": ("dentalhub_bot.core.logger", "setup_structured_logging"),
    # Services
    "BookingFlow": ("dentalhub_bot.services.bot", "BookingFlow"),
    "BrowserSession": ("dentalhub_bot.services.bot", "BrowserSession"),
    "run_booking": ("dentalhub_bot.services.bot", "run_booking"),
    "ConsolePrompter": ("dentalhub_bot.services.intake", "ConsolePrompter"),
    "IntakeService": ("dentalhub_bot.services.intake", "IntakeService"),
}

__all__ = ["__version__", *_LAZY_MODULE_MAP.keys()]


def __getattr__(name: str) -> Any:
    """Lazy import with explicit mapping - importlib based."""
    if name in _LAZY_MODULE_MAP:
        module_path, attr_name = _LAZY_MODULE_MAP[name]
        module = _importlib.import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
