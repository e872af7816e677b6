"""
Init command implementation for Local Ports CLI
"""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from ..config import Config, CONFIG_FILE

console = Console()

def init_command(path: Optional[Path] = None, force: bool = False):
    """Write a default configuration file"""
    path = path or CONFIG_FILE
    try:
        if path.exists() and not force:
            if not Confirm.ask(f"{path} already exists. Overwrite?"):
                return

        saved = Config().save(path)
        console.print(f"[bold green]✓ Configuration written to {saved}")
        console.print("\nEdit it to change the ss binary or the snapshot timeout.")
    except OSError as e:
        console.print(f"[bold red]Error: {str(e)}")
        raise typer.Exit(code=1)
