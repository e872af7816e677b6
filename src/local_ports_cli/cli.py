"""
Command-line interface for Local Ports CLI
"""
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .lib.models import Mode, PortRange, Protocol
from .lib.cmd import (
    # Command implementations
    ports_command,
    summary_command,
    check_command,
    init_command
)

app = typer.Typer(help="Local Ports CLI - show listening and free TCP/UDP ports")

class RangeName(str, Enum):
    privileged = "privileged"
    unprivileged = "unprivileged"

    def to_range(self) -> PortRange:
        return PortRange[self.name.upper()]

@app.command()
def used(
    protocol: Protocol = typer.Option(Protocol.TCP, '--protocol', '-p', help='Transport protocol'),
    port_range: RangeName = typer.Option(RangeName.privileged, '--range', '-r', help='Port range to report'),
    as_json: bool = typer.Option(False, '--json', help='Print the result as JSON'),
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """Show ports that are currently listening"""
    return ports_command(
        protocol=protocol,
        port_range=port_range.to_range(),
        mode=Mode.USED,
        as_json=as_json,
        debug=debug
    )

@app.command()
def free(
    protocol: Protocol = typer.Option(Protocol.TCP, '--protocol', '-p', help='Transport protocol'),
    port_range: RangeName = typer.Option(RangeName.privileged, '--range', '-r', help='Port range to report'),
    as_json: bool = typer.Option(False, '--json', help='Print the result as JSON'),
    full_list: bool = typer.Option(False, '--list', '-l', help='List every free port instead of compact runs'),
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """Show ports that nothing is listening on"""
    return ports_command(
        protocol=protocol,
        port_range=port_range.to_range(),
        mode=Mode.FREE,
        as_json=as_json,
        full_list=full_list,
        debug=debug
    )

@app.command()
def summary(
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """Show used and free port counts for TCP and UDP"""
    return summary_command(debug=debug)

@app.command()
def check(
    port: int = typer.Argument(..., help='Port number to check'),
    protocol: Protocol = typer.Option(Protocol.TCP, '--protocol', '-p', help='Transport protocol'),
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """
    Check whether a port is in use

    Exits with code 0 if the port is free and 1 if it is in use.
    """
    return check_command(port=port, protocol=protocol, debug=debug)

@app.command()
def init(
    config: Optional[Path] = typer.Option(None, '--config', '-c', help='Path to write the configuration to'),
    force: bool = typer.Option(False, '--force', '-f', help='Overwrite an existing configuration')
):
    """Write a default configuration file"""
    return init_command(path=config, force=force)

def main():
    """Main entry point"""
    import logging

    # Set up basic logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Run the app
    app()

if __name__ == "__main__":
    main()
