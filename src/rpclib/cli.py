"""Typer CLI entrypoint for rpc-cli.

Makes a single JSON-RPC 2.0 call and prints the result as JSON:

  rpc-cli --host http://localhost:4000/rpc --method Calc.Add '{"a": 2, "b": 3}'
  echo '{"id": "x0x0"}' | rpc-cli -h http://localhost:4000/rpc -m Project.Find -
"""

from __future__ import annotations

import json
import sys

import typer
from rich.console import Console
from rich.markup import escape

from . import log_setup
from .client import Client
from .shared.exceptions import ProtocolError, RPCError
from .transport.http import HTTPXTransport
from .version import __version__

app = typer.Typer(
    name="rpc-cli",
    help="Allows making JSON-RPC 2.0 requests.",
    add_completion=False,
)
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rpc-cli {__version__}")
        raise typer.Exit()


def _read_params(input_data: str | None) -> object:
    """Parse INPUT as JSON; ``-`` means read it from stdin."""
    if input_data == "-":
        input_data = sys.stdin.read()
    try:
        return json.loads(input_data or "")
    except json.JSONDecodeError as exc:
        err_console.print(
            f"[red]error:[/red] failed to parse INPUT to JSON: {escape(str(exc))}"
        )
        raise typer.Exit(code=1)


def _render(result: object, raw: bool) -> str:
    if raw:
        return json.dumps(result, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(result, indent=2, ensure_ascii=False)


@app.command()
def main(
    host: str = typer.Option(
        ...,
        "--host",
        "-h",
        envvar="RPC_HOST",
        help="The host to hit, e.g. http://localhost:4000/rpc",
    ),
    method: str = typer.Option(
        ..., "--method", "-m", help="The RPC method, e.g. Calc.Add"
    ),
    input_data: str = typer.Argument(
        None,
        metavar="INPUT",
        help="JSON params for the call, or - to read them from stdin",
        show_default=False,
    ),
    raw: bool = typer.Option(
        False, "--raw", help="Print compact JSON instead of pretty printed"
    ),
    call_id: str = typer.Option("1", "--id", help="Request id sent with the call"),
    username: str = typer.Option(
        None, "--username", "-u", envvar="RPC_USERNAME", help="Basic auth username"
    ),
    password: str = typer.Option(
        None, "--password", "-p", envvar="RPC_PASSWORD", help="Basic auth password"
    ),
    user_agent: str = typer.Option(
        f"rpc-cli/{__version__}", "--user-agent", help="User-Agent header value"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log the HTTP exchange to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Call METHOD on HOST with INPUT as params and print the result."""
    if verbose:
        log_setup.init("DEBUG", log_levels={"httpcore": "WARNING"})

    params = _read_params(input_data)

    client = Client(host, transport=HTTPXTransport()).with_user_agent(user_agent)
    if username is not None:
        client = client.with_basic_auth(username, password)

    with client:
        try:
            result = client.call(call_id, method, params)
        except ProtocolError as exc:
            err_console.print(
                f"[red]error:[/red] server returned error {exc.code}:"
                f" {escape(exc.error.message)}"
            )
            raise typer.Exit(code=1)
        except RPCError as exc:
            err_console.print(
                f"[red]{exc.kind.value} error:[/red] {escape(exc.message)}"
            )
            raise typer.Exit(code=1)

    typer.echo(_render(result, raw), nl=False)


if __name__ == "__main__":
    app()
