# src/taskpad/ui/theme.py

"""Color & style helpers for the console views.

- Disabled automatically when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables styling completely.
- Truecolor when COLORTERM says so, otherwise the xterm 256-color cube.
- "system" mode keeps the terminal's own colors and only uses bold/dim/strike.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

THEME_MODES: tuple[str, ...] = ("light", "dark", "system")

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_TRUECOLOR = any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

_PALETTES: dict[str, dict[str, str]] = {
    "light": {
        "header": "#1F3A68",
        "index": "#476EAE",
        "high": "#B3261E",
        "medium": "#9A6700",
        "low": "#2E7D32",
        "muted": "#8A8A8A",
    },
    "dark": {
        "header": "#8AB4F8",
        "index": "#48B3AF",
        "high": "#F28B82",
        "medium": "#F6FF99",
        "low": "#A7E399",
        "muted": "#9AA0A6",
    },
}


def colors_enabled() -> bool:
    return (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    return f"\033[38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}m"


@dataclass(frozen=True, slots=True)
class Theme:
    mode: str = "system"
    enabled: bool = field(default_factory=colors_enabled)

    def _role(self, role: str) -> str:
        palette = _PALETTES.get(self.mode)
        if not palette or role not in palette:
            return ""
        return _fg(palette[role])

    def paint(self, text: str, *styles: str) -> str:
        if not self.enabled or not any(styles):
            return text
        return "".join(styles) + text + RESET

    def header(self, text: str) -> str:
        return self.paint(text, BOLD, self._role("header"))

    def index(self, text: str) -> str:
        return self.paint(text, BOLD, self._role("index"))

    def priority(self, text: str, priority: str) -> str:
        return self.paint(text, self._role(priority.lower()))

    def done(self, text: str) -> str:
        return self.paint(text, DIM, STRIKE, self._role("muted"))

    def muted(self, text: str) -> str:
        return self.paint(text, DIM)


def theme_for(mode: str | None) -> Theme:
    mode = (mode or "system").lower()
    return Theme(mode=mode if mode in THEME_MODES else "system")
