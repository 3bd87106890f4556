"""
hostkit.main
------------
AUTHOR: carter-vin

PURPOSE:
- Operator entrypoint for the hostkit utilities
- Results on stdout, structured events on stderr

Exit codes:
- 0 ok
- 1 recoverable failure (I/O, entropy)
- 2 / 3 disk --check found DEGRADED / UNHEALTHY
- 70 secret could not be initialized or read
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import typer

from hostkit import __version__
from hostkit.atomic import overwrite
from hostkit.diskinfo import new_disk_info
from hostkit.errors import EntropyError, FatalSecretError
from hostkit.evaluate import DISK_DEGRADED_PCT, DISK_UNHEALTHY_PCT, assess_disk, worst_health
from hostkit.logging import emit_event
from hostkit.outcome import run_step
from hostkit.rand import random_number
from hostkit.render import DiskRow, get_renderer
from hostkit.secret import Secret

app = typer.Typer(
    add_completion=False,
    help="hostkit: disk usage, random numbers, atomic writes and persistent secrets",
)
secret_app = typer.Typer(add_completion=False, help="Persistent random secret")
app.add_typer(secret_app, name="secret")

DEFAULT_DISK_PATH = "/"
DEFAULT_SECRET_PATH = "state/secret"

EXIT_FAILURE = 1
EXIT_DEGRADED = 2
EXIT_UNHEALTHY = 3
EXIT_SECRET_FATAL = 70


# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Print a hint when no subcommand is given
    """
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: hostkit --help")


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print tool version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"hostkit v{__version__}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("disk")
def disk(
    paths: list[str] = typer.Option(
        [DEFAULT_DISK_PATH],
        "--path",
        envvar="HOSTKIT_DISK_PATH",
        help="Path on the filesystem to query (repeatable).",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        help="Output format: text, table or json.",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Assess used percentage and exit 2 (DEGRADED) or 3 (UNHEALTHY).",
    ),
    warn_pct: float = typer.Option(
        DISK_DEGRADED_PCT,
        "--warn-pct",
        envvar="HOSTKIT_DISK_WARN_PCT",
        help="Used percentage at which a disk is DEGRADED.",
    ),
    crit_pct: float = typer.Option(
        DISK_UNHEALTHY_PCT,
        "--crit-pct",
        envvar="HOSTKIT_DISK_CRIT_PCT",
        help="Used percentage at which a disk is UNHEALTHY.",
    ),
) -> None:
    """
    Report free / used / total space for one or more paths
    """
    try:
        renderer = get_renderer(output_format)
    except ValueError:
        raise typer.BadParameter("--format must be 'text', 'table' or 'json'")

    if check and warn_pct > crit_pct:
        raise typer.BadParameter("--warn-pct must be <= --crit-pct")

    rows: list[DiskRow] = []
    failed = False

    for path in paths:
        out = run_step(path, new_disk_info, path)

        if not out.ok:
            failed = True
            emit_event(
                "disk_query_failed",
                tool_version=__version__,
                path=path,
                error_type=out.error_type,
                message=out.error_message,
            )
            rows.append(DiskRow(path=path, info=None, error=out.error_message))
            continue

        info = out.value
        emit_event(
            "disk_queried",
            tool_version=__version__,
            path=path,
            total_bytes=info.total,
            free_bytes=info.free,
        )

        if check:
            health, reasons = assess_disk(info, warn_pct=warn_pct, crit_pct=crit_pct)
            rows.append(DiskRow(path=path, info=info, health=health, reasons=tuple(reasons)))
        else:
            rows.append(DiskRow(path=path, info=info))

    typer.echo(renderer(rows))

    if failed:
        raise typer.Exit(code=EXIT_FAILURE)

    if check:
        worst = worst_health([row.health for row in rows if row.health is not None])
        if worst == "UNHEALTHY":
            raise typer.Exit(code=EXIT_UNHEALTHY)
        if worst == "DEGRADED":
            raise typer.Exit(code=EXIT_DEGRADED)


@app.command("rand")
def rand(
    count: int = typer.Option(
        1,
        "--count",
        min=1,
        help="How many numbers to print, one per line.",
    ),
) -> None:
    """
    Print cryptographically secure unsigned 32-bit integers
    """
    try:
        for _ in range(count):
            typer.echo(str(random_number()))
    except EntropyError as e:
        emit_event(
            "entropy_failed",
            tool_version=__version__,
            error_type=type(e).__name__,
            message=str(e),
        )
        raise typer.Exit(code=EXIT_FAILURE)

    emit_event("random_generated", tool_version=__version__, count=count)


@app.command("overwrite")
def overwrite_cmd(
    target: Path = typer.Argument(..., help="File to replace atomically."),
    mode: str = typer.Option(
        "0644",
        "--mode",
        help="Octal permission bits for the new file.",
    ),
    text: str | None = typer.Option(
        None,
        "--text",
        help="Content to write; stdin is read when omitted.",
    ),
) -> None:
    """
    Atomically replace a file with new content
    """
    try:
        perm = int(mode, 8)
    except ValueError:
        raise typer.BadParameter("--mode must be an octal number such as 0644")

    if text is not None:
        data = text.encode("utf-8")
    else:
        data = typer.get_binary_stream("stdin").read()

    try:
        overwrite(target, data, perm)
    except OSError as e:
        emit_event(
            "overwrite_failed",
            tool_version=__version__,
            path=str(target),
            error_type=type(e).__name__,
            message=str(e),
        )
        raise typer.Exit(code=EXIT_FAILURE)

    emit_event(
        "overwrite_done",
        tool_version=__version__,
        path=str(target),
        bytes=len(data),
        mode=oct(perm),
    )


def _ensure_secret_dir(path: Path) -> None:
    """
    Create the secret's parent directory

    Failure here is a plain I/O error (exit 1); the secret itself was never touched
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        emit_event(
            "secret_dir_failed",
            tool_version=__version__,
            path=str(path.parent),
            error_type=type(e).__name__,
            message=str(e),
        )
        raise typer.Exit(code=EXIT_FAILURE)


@secret_app.command("get")
def secret_get(
    path: Path = typer.Option(
        DEFAULT_SECRET_PATH,
        "--path",
        envvar="HOSTKIT_SECRET_PATH",
        help="Secret file location.",
    ),
) -> None:
    """
    Print the secret, creating it on first use
    """
    _ensure_secret_dir(path)

    try:
        value = Secret(path).get()
    except FatalSecretError as e:
        emit_event(
            "secret_fatal",
            tool_version=__version__,
            path=str(path),
            error_type=type(e).__name__,
            message=str(e),
        )
        raise typer.Exit(code=EXIT_SECRET_FATAL)

    emit_event("secret_read", tool_version=__version__, path=str(path))
    typer.echo(value)


@secret_app.command("reset")
def secret_reset(
    path: Path = typer.Option(
        DEFAULT_SECRET_PATH,
        "--path",
        envvar="HOSTKIT_SECRET_PATH",
        help="Secret file location.",
    ),
) -> None:
    """
    Replace the secret with a new random value
    """
    _ensure_secret_dir(path)

    try:
        Secret(path).reset()
    except (OSError, EntropyError) as e:
        emit_event(
            "secret_reset_failed",
            tool_version=__version__,
            path=str(path),
            error_type=type(e).__name__,
            message=str(e),
        )
        raise typer.Exit(code=EXIT_FAILURE)

    emit_event("secret_reset", tool_version=__version__, path=str(path))


if __name__ == "__main__":
    app()
