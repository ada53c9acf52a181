"""Operator intake over the console."""

from .console_intake import ConsolePrompter, IntakeService

__all__ = ["ConsolePrompter", "IntakeService"]
