# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour constants for Rich markup and prompt_toolkit styles, based on the
One Dark palette.

Example:
    console.print(f"[{OneColors.DARK_RED}]Unknown command[/]")
"""


class OneColors:
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    LIGHT_YELLOW = "#FFD580"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    GREEN_b = f"bold {GREEN}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
