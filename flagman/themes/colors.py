# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour constants and the rich theme used by the Flagman console.

`OneColors` holds One Dark hex styles for inline markup such as
`f"[{OneColors.DARK_RED}]..."`. `NordColors` feeds the named styles of the
console theme returned by `get_nord_theme()`.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"
    GREEN_b = f"bold {GREEN}"
    MAGENTA_b = f"bold {MAGENTA}"


class NordColors:
    POLAR_NIGHT_ORIGIN = "#2E3440"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    FROST_ICE = "#88C0D0"
    FROST_DEEP = "#5E81AC"
    AURORA_RED = "#BF616A"
    AURORA_YELLOW = "#EBCB8B"
    AURORA_GREEN = "#A3BE8C"
    AURORA_PURPLE = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the rich theme used by the shared console."""
    return Theme(
        {
            "table.header": f"bold {NordColors.FROST_ICE}",
            "table.title": f"bold {NordColors.FROST_DEEP}",
            "repr.str": NordColors.AURORA_GREEN,
            "repr.number": NordColors.AURORA_PURPLE,
            "logging.level.info": NordColors.FROST_ICE,
            "logging.level.warning": NordColors.AURORA_YELLOW,
            "logging.level.error": f"bold {NordColors.AURORA_RED}",
        }
    )
