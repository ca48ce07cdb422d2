"""CLI application entry point and command routing for warp-route-id.

This module is the **sole error boundary** for the entire application.
It catches :class:`~warp_route_id.exceptions.WarpRouteIdError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Results go to stdout through :data:`~warp_route_id.cli.console.output`;
  diagnostics and errors go to stderr through
  :data:`~warp_route_id.cli.console.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys

from warp_route_id.cli import exit_codes
from warp_route_id.cli.console import console, output
from warp_route_id.core.hex_bytes import Address
from warp_route_id.exceptions import EncodingError, FormatError, WarpRouteIdError
from warp_route_id.utils.constants import DEFAULT_DECIMALS
from warp_route_id.version import __version__

_DOCTOR = "doctor"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``warp-route-id -d <deployer> -t <token-address>`` — derive IDs
    * ``warp-route-id doctor``  — environment diagnostics
    * ``warp-route-id --version``
    """
    parser = argparse.ArgumentParser(
        prog="warp-route-id",
        description=(
            "Computes the warp route ID and token ID for a warp route "
            "mapping a token from an EVM chain to a Sovereign SDK chain."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="Optional command: 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "-d",
        "--deployer",
        default=None,
        help=(
            "The address that will be used to deploy the warp route on "
            "the Sovereign SDK chain."
        ),
    )
    parser.add_argument(
        "-t",
        "--token-address",
        default=None,
        help="The address of the token on the EVM chain.",
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=DEFAULT_DECIMALS,
        help=f"Decimals of the synthetic token, 0-255 (default: {DEFAULT_DECIMALS}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the result as a single JSON object.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the exact bytes hashed for each identifier on stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _parse_address(label: str, text: str) -> Address:
    """Parse *text* as an address, naming the offending option on failure."""
    try:
        return Address.from_hex(text)
    except FormatError as exc:
        raise FormatError(
            f"Invalid {label}: {exc}",
            hint="Expected 40 hex digits, optionally prefixed with 0x.",
        ) from exc


def _handle_derive(
    token_address_text: str,
    deployer_text: str,
    decimals: int,
    *,
    as_json: bool = False,
    verbose: bool = False,
) -> int:
    """Derive and print the warp route ID and token ID.

    Flow:
    1. Parse both addresses (fails before any hashing).
    2. Derive both identifiers through the core service.
    3. Print the result as text or JSON.
    """
    from warp_route_id.core.derivation import token_id_preimage, warp_route_preimage
    from warp_route_id.core.identifier_service import IdentifierService
    from warp_route_id.infra.bech32_formatter import Bech32mTokenIdFormatter

    token_address = _parse_address("token address", token_address_text)
    deployer = _parse_address("deployer address", deployer_text)

    service = IdentifierService(Bech32mTokenIdFormatter())
    result = service.derive(token_address, deployer, decimals)

    if verbose:
        route_preimage = warp_route_preimage(token_address, deployer)
        token_preimage = token_id_preimage(result.warp_route_id, decimals)
        console.print(
            f"[dim]warp route preimage ({len(route_preimage)} bytes):[/dim] "
            f"0x{route_preimage.hex()}"
        )
        console.print(
            f"[dim]token id preimage ({len(token_preimage)} bytes):[/dim] "
            f"0x{token_preimage.hex()}"
        )

    if as_json:
        output.print(json.dumps(result.to_dict()))
    else:
        output.print(f"Warp Route ID: {result.warp_route_id}")
        output.print(f"Token ID: {result.token_id_bech32}")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from warp_route_id.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the warp-route-id CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is not None:
        if args.command.lower() != _DOCTOR:
            parser.error(f"unknown command: {args.command}")
        return _handle_doctor()

    if args.deployer is None and args.token_address is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.deployer is None or args.token_address is None:
        parser.error("both --deployer and --token-address are required")

    return _handle_derive(
        args.token_address,
        args.deployer,
        args.decimals,
        as_json=args.as_json,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EncodingError as exc:
        # Constant prefix + 32-byte payload: this is a defect, not bad input.
        console.print(
            "[bold red]Internal error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except WarpRouteIdError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
