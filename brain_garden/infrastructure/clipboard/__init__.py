"""Реализации BaseClipboard."""

from brain_garden.infrastructure.clipboard.system import CLIPBOARD_COMMANDS, SystemClipboard
from brain_garden.infrastructure.clipboard.memory import MemoryClipboard

__all__ = ["CLIPBOARD_COMMANDS", "SystemClipboard", "MemoryClipboard"]
