# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used for help and error output.

`OneColors` holds hex color strings usable directly in rich markup, e.g.
`console.print(f"[{OneColors.DARK_RED}]Error[/]")`. `get_chad_theme()` maps
the semantic style names used by chad (`chad.error`, `chad.usage`, ...) onto
those colors.
"""
from rich.theme import Theme


class OneColors:
    """Subset of the One Dark palette."""

    BLACK = "#282C34"
    WHITE = "#FFFFFF"
    LIGHT_GRAY = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    RED = "#E06C75"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_chad_theme() -> Theme:
    return Theme(
        {
            "chad.usage": f"bold {OneColors.WHITE}",
            "chad.heading": f"bold {OneColors.BLUE}",
            "chad.flag": OneColors.CYAN,
            "chad.required": f"bold {OneColors.YELLOW}",
            "chad.default": OneColors.COMMENT_GREY,
            "chad.error": f"bold {OneColors.DARK_RED}",
            "chad.explicit": OneColors.GREEN,
            "chad.defaulted": OneColors.MAGENTA,
        }
    )
