# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argline applications."""
from rich.console import Console

console = Console(color_system="truecolor")
