"""``warp-route-id doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can derive and format identifiers.
The last row re-derives a known vector so a broken install or a
patched dependency shows up as a failed check instead of wrong IDs.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import importlib.metadata
import platform
import sys

from warp_route_id.cli import exit_codes
from warp_route_id.cli.console import console
from warp_route_id.utils.constants import DEFAULT_DECIMALS, ZERO_VECTOR_WARP_ROUTE_ID
from warp_route_id.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_version(distribution: str) -> str:
    try:
        return importlib.metadata.version(distribution)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _embit_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the embit row."""
    try:
        import embit  # noqa: F401
    except ImportError:
        return "embit", "NOT INSTALLED", "[red]FAIL[/red]"
    return "embit", _package_version("embit"), "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich row."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "not installed", "[yellow]WARN[/yellow]"
    return "rich", _package_version("rich"), "[green]OK[/green]"


def _self_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the known-vector derivation row."""
    from warp_route_id.core.derivation import get_token_id, get_warp_route_id
    from warp_route_id.core.hex_bytes import Address
    from warp_route_id.exceptions import WarpRouteIdError
    from warp_route_id.infra.bech32_formatter import decode_token_id, format_token_id

    zero = Address(bytes(Address.LENGTH))
    warp_route_id = get_warp_route_id(zero, zero)
    if warp_route_id.to_hex() != ZERO_VECTOR_WARP_ROUTE_ID:
        return "self-check", "warp route ID mismatch", "[red]FAIL[/red]"

    token_id = get_token_id(warp_route_id, DEFAULT_DECIMALS)
    try:
        round_trip = decode_token_id(format_token_id(token_id))
    except WarpRouteIdError as exc:
        return "self-check", str(exc), "[red]FAIL[/red]"
    if round_trip != token_id:
        return "self-check", "bech32m round-trip mismatch", "[red]FAIL[/red]"
    return "self-check", "known vector reproduced", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _tool_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the warp-route-id version row."""
    return "warp-route-id", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nwarp-route-id doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<34} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<34} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _tool_version_check(),
        _python_version_check(),
        _embit_check(),
        _rich_check(),
        _os_check(),
    ]
    # The self-check needs embit; skip it rather than fail twice.
    if "FAIL" not in checks[2][2]:
        checks.append(_self_check())

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="warp-route-id doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
