"""
Port query command implementations for Local Ports CLI
"""
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ConfigError
from ..models import Mode, PortRange, Protocol
from ..query import PortStateQuery
from ..snapshot.base import QueryError
from ..utils import format_port_ranges, validate_port

console = Console()
logger = logging.getLogger("local_ports_cli.lib.cmd.ports")

def _setup_logging(debug: bool):
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

def _fail(message: str):
    console.print(f"[bold red]{escape(message)}")
    raise typer.Exit(code=1)

def _build_query(query: Optional[PortStateQuery]) -> PortStateQuery:
    if query is not None:
        return query
    try:
        return PortStateQuery.from_config()
    except ConfigError as e:
        _fail(f"Configuration error: {str(e)}")
    except ValueError as e:
        _fail(f"Error: {str(e)}")

def _describe(protocol: Protocol, port_range: PortRange) -> str:
    return f"{protocol.name} {port_range.label} ({port_range.low}-{port_range.high})"

def _print_json(protocol: Protocol, port_range: PortRange, mode: Mode, ports: Optional[List[int]]):
    console.print_json(data={
        "protocol": protocol.value,
        "range": port_range.label,
        "mode": mode.value,
        "ports": ports
    })

def ports_command(
    protocol: Protocol,
    port_range: PortRange,
    mode: Mode,
    as_json: bool = False,
    full_list: bool = False,
    debug: bool = False,
    query: Optional[PortStateQuery] = None
) -> None:
    """
    Show used or free ports for one protocol and range

    Free lists are printed in compact run notation unless full_list is set.
    """
    _setup_logging(debug)
    query = _build_query(query)

    try:
        ports = query.query(protocol, port_range, mode)
    except QueryError as e:
        logger.debug(f"Query failed: {e!r}")
        _fail(f"Port query failed: {str(e)}")

    if as_json:
        _print_json(protocol, port_range, mode, ports)
        return

    label = _describe(protocol, port_range)
    if ports is None:
        if mode is Mode.USED:
            console.print(f"[yellow]No {label} ports are listening")
        else:
            console.print(f"[yellow]All {label} ports are in use")
        return

    state = "in use" if mode is Mode.USED else "free"
    console.print(f"[bold]{label} ports {state} ({len(ports)} total):")
    if mode is Mode.USED or full_list:
        console.print(", ".join(str(port) for port in ports))
    else:
        console.print(format_port_ranges(ports))

def summary_command(debug: bool = False, query: Optional[PortStateQuery] = None) -> None:
    """Show used and free counts for every protocol and range"""
    _setup_logging(debug)
    query = _build_query(query)

    table = Table(title="Listening ports")
    table.add_column("Protocol", style="cyan")
    table.add_column("Range", style="magenta")
    table.add_column("Used", style="yellow", justify="right")
    table.add_column("Free", style="green", justify="right")
    table.add_column("Listening", style="blue")

    for protocol in Protocol:
        for port_range in PortRange:
            try:
                used = query.listening_ports(protocol, port_range)
            except QueryError as e:
                _fail(f"Port query failed: {str(e)}")

            table.add_row(
                protocol.name,
                f"{port_range.label} ({port_range.low}-{port_range.high})",
                str(len(used)),
                str(len(port_range) - len(used)),
                format_port_ranges(sorted(used)) or "-"
            )

    console.print(table)

def check_command(
    port: int,
    protocol: Protocol = Protocol.TCP,
    debug: bool = False,
    query: Optional[PortStateQuery] = None
) -> None:
    """
    Check whether a single port is in use

    Exits with code 0 when the port is free and 1 when it is in use.
    """
    _setup_logging(debug)

    if not validate_port(port):
        _fail(f"Invalid port number: {port}")

    query = _build_query(query)

    try:
        used = query.is_port_used(protocol, port)
    except QueryError as e:
        _fail(f"Port query failed: {str(e)}")

    if used:
        console.print(f"[bold yellow]! {protocol.name} port {port} is in use")
        raise typer.Exit(code=1)

    console.print(f"[bold green]✓ {protocol.name} port {port} is free")
