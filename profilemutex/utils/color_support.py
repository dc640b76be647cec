# profilemutex/utils/color_support.py

import os
import sys
from functools import lru_cache
from typing import Optional, TextIO

from colorama import Fore, Style, init as colorama_init


class ColorSupport:
    """Decides whether console output may carry ANSI colours and applies them."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._force_color: Optional[bool] = self._get_env_force_color()
        self._reinit_colorama()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @staticmethod
    def _get_env_force_color() -> Optional[bool]:
        if os.environ.get("NO_COLOR") is not None:
            return False
        if os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes"):
            return True
        return None

    def _reinit_colorama(self) -> None:
        colorama_init(strip=not self.supports_color(), convert=True, wrap=True, autoreset=True)

    def set_force_color(self, force: Optional[bool]) -> None:
        """Force or reset colour detection.

        Args:
            force: ``True`` to force-enable colours, ``False`` to disable them and
                ``None`` to fall back to environment-based detection.
        """
        if force not in (True, False, None):
            raise ValueError("force must be True, False or None")

        target = self._get_env_force_color() if force is None else force
        if target == self._force_color:
            return

        self._force_color = target
        self.supports_color.cache_clear()
        self._reinit_colorama()

    @lru_cache(maxsize=1)
    def supports_color(self) -> bool:
        """Colour support for the logging stream (stderr unless given)."""
        return self.stream_supports_color(self.stream)

    def stream_supports_color(self, stream: TextIO) -> bool:
        if self._force_color is not None:
            return self._force_color

        term = os.environ.get("TERM", "").lower()
        if "dumb" in term:
            return False
        if sys.platform == "win32":
            return "WT_SESSION" in os.environ or "ANSICON" in os.environ

        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            return True
        return bool(os.environ.get("COLORTERM"))

    def colored(
        self,
        text: str,
        color: Optional[str] = None,
        bright: bool = False,
        stream: Optional[TextIO] = None,
    ) -> str:
        """Colour ``text`` when the stream it is written to supports it."""
        if not text:
            return text
        enabled = self.supports_color() if stream is None else self.stream_supports_color(stream)
        if not enabled:
            return text
        prefix = (Style.BRIGHT if bright else "") + (color or "")
        return f"{prefix}{text}{Style.RESET_ALL}"

    def error(self, text: str, stream: Optional[TextIO] = None) -> str:
        return self.colored(text, Fore.RED, bright=True, stream=stream)

    def warning(self, text: str, stream: Optional[TextIO] = None) -> str:
        return self.colored(text, Fore.YELLOW, stream=stream)

    def success(self, text: str, stream: Optional[TextIO] = None) -> str:
        return self.colored(text, Fore.GREEN, stream=stream)

    def info(self, text: str, stream: Optional[TextIO] = None) -> str:
        return self.colored(text, Fore.CYAN, stream=stream)


# Global instance
color_support = ColorSupport()
