"""
hostinfo.main
------------
AUTHOR: carter-vin

PURPOSE:
- Sample host identity + capacity of one disk, write a single row to libSQL, exit
- Stable CLI entrypoint for cron/systemd timers (no loop of its own)

Key contract:
- `hostinfo-agent` with no subcommand performs one collection run.
- `hostinfo-agent oneshot` does the same, with an optional --env-file.
- `hostinfo-agent version` executes the version subcommand.
- Any AgentError -> "Error: ..." on stderr, exit code 1.
"""

from __future__ import annotations

import asyncio
import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone

import typer

from hostinfo.collectors.base import run_collector
from hostinfo.collectors.disk import DiskResult, collect_disk
from hostinfo.collectors.system import SystemResult, collect_system
from hostinfo.config import DEFAULT_ENV_FILE, AgentConfig, load_config
from hostinfo.db import connect, insert_info
from hostinfo.errors import AgentError
from hostinfo.logging import emit_event
from hostinfo.model import InfoRow, build_info_row

# Explicit multi-command CLI
app = typer.Typer(
    add_completion=False,
    help="hostinfo-agent: one-shot host and disk reporting to libSQL",
)

AGENT_VERSION = "0.1.0"

# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    - help correlate issues across hosts and times
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    """
    Collect env details

    Note:
    - utc_now intentionally dynamic to reflect current time
    - other fields intended stable per host/runtime
    """
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


# -----------------------------
# PIPELINE
# -----------------------------
async def run_once(config: AgentConfig) -> InfoRow:
    """
    connect -> sample system -> sample disk -> insert

    Sampling is synchronous; connect and insert are the only awaits.
    Raises AgentError subclasses; nothing is retried.
    """
    async with connect(config) as client:
        emit_event("db_connected", agent_version=AGENT_VERSION)

        sys_out = run_collector("system", collect_system)
        if sys_out.ok:
            system = sys_out.value
        else:
            # OS/host name are optional; report empty strings instead of failing
            emit_event(
                "collector_failed",
                agent_version=AGENT_VERSION,
                collector="system",
                error_type=sys_out.error_type,
                message=sys_out.error_message,
            )
            system = SystemResult(system_name="", system_host_name="")

        emit_event(
            "system_sampled",
            agent_version=AGENT_VERSION,
            system_name=system.system_name,
            system_host_name=system.system_host_name,
        )

        disk_out = run_collector("disk", collect_disk)
        if not disk_out.ok:
            emit_event(
                "collector_failed",
                agent_version=AGENT_VERSION,
                collector="disk",
                error_type=disk_out.error_type,
                message=disk_out.error_message,
            )
            # Disk failures (e.g. undecodable mount point) are fatal
            raise disk_out.error

        disk = disk_out.value
        if disk is None:
            emit_event("disk_not_found", agent_version=AGENT_VERSION)
            disk = DiskResult.empty()
        else:
            emit_event(
                "disk_selected",
                agent_version=AGENT_VERSION,
                total_space=disk.total_space,
                available_space=disk.available_space,
                used_space=disk.used_space,
            )

        row = build_info_row(system, disk)
        await insert_info(client, row)

        emit_event("row_inserted", agent_version=AGENT_VERSION, table="info")
        return row


def collect_and_store(env_file: str | None = DEFAULT_ENV_FILE) -> None:
    """
    Single top-level handler: load config, run the pipeline, decide exit behavior
    """
    emit_event("agent_start", agent_version=AGENT_VERSION, mode="oneshot")

    try:
        # Config errors abort before any connection or sampling
        config = load_config(env_file=env_file)
        asyncio.run(run_once(config))

    except AgentError as e:
        emit_event(
            "run_failed",
            agent_version=AGENT_VERSION,
            error_type=type(e).__name__,
            message=str(e),
        )
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    except Exception as e:
        # Unexpected: surface the event, keep the traceback
        emit_event(
            "run_failed",
            agent_version=AGENT_VERSION,
            error_type=type(e).__name__,
            message=str(e),
        )
        raise

    finally:
        emit_event("agent_shutdown", agent_version=AGENT_VERSION, mode="oneshot")


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Root command behavior.

    No subcommand means one collection run, so the bare command works from cron.
    """
    if ctx.invoked_subcommand is None:
        collect_and_store()


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print agent version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"hostinfo-agent v{AGENT_VERSION}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("oneshot")
def oneshot(
    env_file: str = typer.Option(
        DEFAULT_ENV_FILE,
        "--env-file",
        help="Env file with KEY=value overrides (ignored if missing).",
    ),
) -> None:
    """
    Collect once, insert one row into `info`, exit

    Failure semantics:
    - missing LIBSQL_URL, connect/insert failures, undecodable mount point -> exit 1
    """
    collect_and_store(env_file)


if __name__ == "__main__":
    app()
