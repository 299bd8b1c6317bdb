"""osservice command line: manage a program as a native OS service."""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from ._AbstractImpl import _AbstractImpl
from .Config import Config
from .control import control
from .logging_config import setup_logging
from .Options import Options
from .ServiceError import NotInstalledError, ServiceError
from .Status import Status
from .SystemRegistry import available_systems, new

console = Console()
err_console = Console(stderr=True)


class _NoWorkload:
    """Placeholder workload; management commands never call run()."""

    def start(self, service: _AbstractImpl) -> None:
        pass

    def stop(self, service: _AbstractImpl) -> None:
        pass


def _service(ctx: typer.Context) -> _AbstractImpl:
    return ctx.obj["service"]


def _control(ctx: typer.Context, action: str) -> None:
    service = _service(ctx)
    try:
        control(service, action)
    except ServiceError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
    console.print(f"{action}: {service} ([bold]{service.platform()}[/bold])")


def _create_app() -> typer.Typer:
    """Create and configure the osservice Typer app."""
    app = typer.Typer(
        name="osservice",
        help="Install and control a program as a native OS service",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        name: str = typer.Option("", "--name", "-n", help="Service name"),
        display_name: str = typer.Option("", "--display-name", help="Human readable name"),
        description: str = typer.Option("", "--description", help="Service description"),
        executable: str = typer.Option("", "--executable", "-e", help="Program to run"),
        arg: list[str] = typer.Option([], "--arg", "-a", help="Program argument (repeatable)"),  # noqa: B008
        working_directory: str = typer.Option("", "--working-directory", "-C", help="Working directory"),
        user: bool = typer.Option(False, "--user/--system", help="Install for the current user only"),
        run_at_load: bool = typer.Option(False, "--run-at-load", help="Start when the manager loads the service"),
        keep_alive: bool = typer.Option(True, "--keep-alive/--no-keep-alive", help="Restart when the program exits"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log manager commands"),
    ) -> None:
        setup_logging(logging.DEBUG if verbose else logging.WARNING)
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()
        if ctx.invoked_subcommand == "systems":
            return
        if not name:
            err_console.print("[red]Error:[/red] --name is required")
            raise typer.Exit(2)

        try:
            config = Config(
                name=name,
                display_name=display_name,
                description=description,
                executable=executable,
                arguments=arg,
                working_directory=working_directory,
                option={
                    Options.USER_SERVICE: user,
                    Options.RUN_AT_LOAD: run_at_load,
                    Options.KEEP_ALIVE: keep_alive,
                },
            )
            service = new(_NoWorkload(), config)
        except (ServiceError, ValidationError) as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from exc
        ctx.ensure_object(dict)
        ctx.obj["service"] = service

    @app.command(name="install")
    def install_cmd(ctx: typer.Context) -> None:
        """Install the service descriptor."""
        _control(ctx, "install")

    @app.command(name="uninstall")
    def uninstall_cmd(ctx: typer.Context) -> None:
        """Stop the service and remove its descriptor."""
        _control(ctx, "uninstall")

    @app.command(name="start")
    def start_cmd(ctx: typer.Context) -> None:
        """Start the service."""
        _control(ctx, "start")

    @app.command(name="stop")
    def stop_cmd(ctx: typer.Context) -> None:
        """Stop the service."""
        _control(ctx, "stop")

    @app.command(name="restart")
    def restart_cmd(ctx: typer.Context) -> None:
        """Restart the service."""
        _control(ctx, "restart")

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show whether the service is running."""
        service = _service(ctx)
        try:
            status = service.status()
        except NotInstalledError:
            console.print(f"{service}: [yellow]not installed[/yellow]")
            raise typer.Exit(3) from None
        except ServiceError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from exc
        color = "green" if status is Status.RUNNING else "yellow"
        console.print(f"{service}: [{color}]{status.value}[/{color}]")

    @app.command(name="systems")
    def systems_cmd() -> None:
        """List the service systems usable on this machine."""
        for system in available_systems():
            console.print(system.name)

    return app


app = _create_app()


def main() -> None:
    app()
