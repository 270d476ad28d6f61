# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""Global console instance used for usage output."""
from rich.console import Console

console = Console()
