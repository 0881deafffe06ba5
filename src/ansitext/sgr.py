"""SGR (Select Graphic Rendition) resolution.

Maps the numeric parameters of a ``CSI ... m`` sequence to a ``StylePatch``:
a rich ``Style`` delta plus a flag recording whether the sequence reset the
style before applying the delta.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Sequence, Tuple

from rich.color import Color
from rich.style import Style

from ansitext.errors import ParseError

logger = logging.getLogger(__name__)

# ANSI SGR codes for basic colors, using rich's standard color names
ANSI_BASIC_COLORS = {
    # Foreground colors (30-37)
    30: "black",
    31: "red",
    32: "green",
    33: "yellow",
    34: "blue",
    35: "magenta",
    36: "cyan",
    37: "white",
    # Bright foreground colors (90-97)
    90: "bright_black",
    91: "bright_red",
    92: "bright_green",
    93: "bright_yellow",
    94: "bright_blue",
    95: "bright_magenta",
    96: "bright_cyan",
    97: "bright_white",
}

ANSI_BASIC_BG_COLORS = {
    # Background colors (40-47)
    40: "black",
    41: "red",
    42: "green",
    43: "yellow",
    44: "blue",
    45: "magenta",
    46: "cyan",
    47: "white",
    # Bright background colors (100-107)
    100: "bright_black",
    101: "bright_red",
    102: "bright_green",
    103: "bright_yellow",
    104: "bright_blue",
    105: "bright_magenta",
    106: "bright_cyan",
    107: "bright_white",
}

ANSI_STYLES: Dict[int, Style] = {
    1: Style(bold=True),
    2: Style(dim=True),
    3: Style(italic=True),
    4: Style(underline=True),
    5: Style(blink=True),
    6: Style(blink2=True),
    7: Style(reverse=True),
    8: Style(conceal=True),
    9: Style(strike=True),
    21: Style(underline2=True),
    22: Style(bold=False, dim=False),
    23: Style(italic=False),
    24: Style(underline=False, underline2=False),
    25: Style(blink=False, blink2=False),
    27: Style(reverse=False),
    28: Style(conceal=False),
    29: Style(strike=False),
    39: Style(color="default"),
    49: Style(bgcolor="default"),
    53: Style(overline=True),
    55: Style(overline=False),
}

SGR_STYLES: Dict[int, Style] = {
    **ANSI_STYLES,
    **{code: Style(color=name) for code, name in ANSI_BASIC_COLORS.items()},
    **{code: Style(bgcolor=name) for code, name in ANSI_BASIC_BG_COLORS.items()},
}

EXTENDED_FOREGROUND = 38
EXTENDED_BACKGROUND = 48

# Extended color modes following 38/48
COLOR_MODE_RGB = 2
COLOR_MODE_INDEXED = 5


@dataclass(frozen=True)
class StylePatch:
    """A style delta produced by one SGR sequence.

    ``reset`` is set when the sequence contained code 0: the patch then
    replaces the base style instead of merging into it.
    """

    style: Style = field(default_factory=Style.null)
    reset: bool = False

    def extend(self, delta: Style) -> StylePatch:
        """Return a patch with *delta* layered over this one."""
        return replace(self, style=self.style + delta)

    def apply(self, base: Style) -> Style:
        """Merge this patch into *base*, returning a new style."""
        if self.reset:
            base = Style.null()
        return base + self.style


def _clamp(value: int) -> int:
    return value if value < 255 else 255


def _extended_color(params: Sequence[int], index: int) -> Tuple[Optional[Color], int]:
    """Read an extended color starting at the 38/48 code at *index*.

    Returns:
        The color (or None for an unsupported mode) and the index of the
        last parameter consumed.
    """
    code = params[index]
    if index + 1 >= len(params):
        raise ParseError(f"SGR {code} requires a color mode")

    mode = params[index + 1]
    if mode == COLOR_MODE_INDEXED:
        # 256-color mode: ESC[38;5;Nm
        if index + 2 >= len(params):
            raise ParseError(f"SGR {code};5 requires a color index")
        return Color.from_ansi(_clamp(params[index + 2])), index + 2

    if mode == COLOR_MODE_RGB:
        # RGB mode: ESC[38;2;R;G;Bm
        if index + 4 >= len(params):
            raise ParseError(f"SGR {code};2 requires red, green and blue components")
        red, green, blue = (_clamp(value) for value in params[index + 2 : index + 5])
        return Color.from_rgb(red, green, blue), index + 4

    logger.debug("Ignoring unsupported color mode %d for SGR %d", mode, code)
    return None, index + 1


def resolve_sgr(params: Sequence[int]) -> StylePatch:
    """Resolve SGR parameters into a single style patch.

    Codes are applied left to right, so later codes override earlier ones
    addressing the same attribute and a 0 discards everything before it.
    Unknown codes are ignored.

    Args:
        params: Parameters of one ``CSI ... m`` sequence.

    Returns:
        The combined ``StylePatch``.

    Raises:
        ParseError: An extended color is missing its sub-parameters.
    """
    patch = StylePatch()
    index = 0

    while index < len(params):
        code = params[index]

        if code == 0:
            # Reset all
            patch = StylePatch(reset=True)

        elif code in (EXTENDED_FOREGROUND, EXTENDED_BACKGROUND):
            color, index = _extended_color(params, index)
            if color is not None:
                if code == EXTENDED_FOREGROUND:
                    patch = patch.extend(Style(color=color))
                else:
                    patch = patch.extend(Style(bgcolor=color))

        elif code in SGR_STYLES:
            patch = patch.extend(SGR_STYLES[code])

        else:
            logger.debug("Ignoring unsupported SGR code %d", code)

        index += 1

    return patch
