"""Системный буфер обмена через утилиты ОС.

Классы:
    SystemClipboard
        Пишет текст через pbcopy / wl-copy / xclip / xsel / clip.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import Optional, Sequence

from brain_garden.exceptions import ClipboardError
from brain_garden.interfaces.clipboard import BaseClipboard
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)

# Команды в порядке предпочтения; первая найденная в PATH используется
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class SystemClipboard(BaseClipboard):
    """Буфер обмена ОС.

    Attributes:
        command: Выбранная команда (None если ни одна не найдена).
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        timeout: float = 2.0,
    ) -> None:
        """Args:
        command: Явная команда; по умолчанию ищется первая доступная.
        timeout: Таймаут запуска утилиты в секундах.
        """
        self.command = tuple(command) if command else self._detect()
        self.timeout = timeout
        logger.debug("Clipboard backend selected", command=self.command)

    @staticmethod
    def _detect() -> Optional[tuple[str, ...]]:
        for command in CLIPBOARD_COMMANDS:
            if shutil.which(command[0]) is not None:
                return command
        return None

    @property
    def available(self) -> bool:
        return self.command is not None

    def write_text(self, text: str) -> None:
        if self.command is None:
            raise ClipboardError(
                f"No clipboard utility found on {sys.platform} "
                f"(tried: {', '.join(c[0] for c in CLIPBOARD_COMMANDS)})"
            )

        try:
            subprocess.run(
                list(self.command),
                input=text.encode("utf-8"),
                check=True,
                timeout=self.timeout,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"Clipboard write failed via {self.command[0]}: {e}") from e
