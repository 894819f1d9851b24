# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for chad output."""
from rich.console import Console

from chad.themes import get_chad_theme

console = Console(color_system="truecolor", theme=get_chad_theme())
