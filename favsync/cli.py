"""Click-based CLI for FavSync - export, import and roll back host favorites."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import click
import yaml
from pydantic import ValidationError

from favsync import __version__
from favsync.config import (
    FavSyncConfig,
    ensure_config_exists,
    get_config_path,
    load_config,
    validate_config_file,
)
from favsync.connector import StoreConnector
from favsync.errors import FavSyncError
from favsync.logger import EventLevel, SyncLogger
from favsync.output import Console, create_console
from favsync.sync import (
    JournalStore,
    default_export_path,
    export_favorites,
    import_from_file,
    rollback_last_import,
    write_artifact,
)


@dataclass
class CliContext:
    """Options shared by all commands."""

    config_path: Optional[Path]
    store_path: Optional[Path]
    verbose: bool
    colored: bool

    def load(self) -> tuple[FavSyncConfig, Console, SyncLogger]:
        """Load configuration and build console and logger, exiting on config errors."""
        try:
            config = load_config(self.config_path)
        except FileNotFoundError as e:
            console = create_console(colored=self.colored)
            console.print_error(str(e))
            sys.exit(1)
        except ValidationError as e:
            console = create_console(colored=self.colored)
            console.print_error(f"Invalid configuration: {e}")
            sys.exit(1)
        except (yaml.YAMLError, ValueError) as e:
            console = create_console(colored=self.colored)
            console.print_error(f"Cannot read configuration: {e}")
            sys.exit(1)

        verbose = self.verbose or config.output.verbose
        colored = self.colored and config.output.colored
        console = create_console(verbose=verbose, colored=colored)
        logger = SyncLogger(console.rich, verbose=verbose, log_file=config.log_file)
        return config, console, logger

    def connector(self, config: FavSyncConfig) -> StoreConnector:
        """Build the host connector from config and command-line overrides."""
        store_path = self.store_path or config.store_path
        return StoreConnector(store_path, navigation_group=config.host.navigation_group)


pass_cli_context = click.make_pass_decorator(CliContext)


def _fail(console: Console, logger: SyncLogger, error: FavSyncError) -> NoReturn:
    """Report a run that could not start and exit with status 1."""
    logger.record(EventLevel.ERROR, f"{type(error).__name__}: {error}")
    console.print_error(str(error))
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="favsync")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: ~/.config/favsync/config.yaml or $FAVSYNC_CONFIG)",
)
@click.option("--store", "store_path", type=click.Path(dir_okay=False, path_type=Path), help="Override host store path")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], store_path: Optional[Path], verbose: bool, no_color: bool) -> None:
    """FavSync - export, import and roll back host favorites.

    \b
    Workflow:
      favsync export -o favorites.json     capture favorites on one host
      favsync import favorites.json        merge them into another host
      favsync rollback                     undo the most recent import
    """
    ctx.obj = CliContext(config_path=config_path, store_path=store_path, verbose=verbose, colored=not no_color)


@cli.command("list")
@pass_cli_context
def list_favorites(cli_ctx: CliContext) -> None:
    """Show the host's current favorites."""
    config, console, logger = cli_ctx.load()
    connector = cli_ctx.connector(config)

    try:
        favorites = connector.list_favorites()
    except FavSyncError as e:
        _fail(console, logger, e)

    console.print_favorites(favorites, title=f"{config.host.navigation_group} ({len(favorites)})")


@cli.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Artifact file to write")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default=None,
    help="Artifact format when no output file is given (default from config)",
)
@pass_cli_context
def export(cli_ctx: CliContext, output: Optional[Path], fmt: Optional[str]) -> None:
    """Export the host's favorites to an artifact file."""
    config, console, logger = cli_ctx.load()
    connector = cli_ctx.connector(config)

    try:
        artifact = export_favorites(
            connector,
            host_id=config.host.host_id,
            user_id=config.host.user_id,
            logger=logger,
        )
    except FavSyncError as e:
        _fail(console, logger, e)

    if output is None:
        output = default_export_path(
            Path(config.export.directory),
            artifact.host_id,
            fmt=fmt or config.export.format.value,
            prefix=config.export.filename_prefix,
        )

    try:
        write_artifact(artifact, output)
    except OSError as e:
        # Favorites were read; only persisting them failed
        logger.record(EventLevel.WARN, f"Cannot write export artifact {output}: {e}")
        console.print_warning(f"Cannot write export artifact {output}: {e}")
        return

    logger.success(f"Wrote {output}")
    console.print_export_result(artifact, str(output))


@cli.command("import")
@click.argument("artifact", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--dry-run", "-n", is_flag=True, help="Show what would be added without changing anything")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_cli_context
def import_command(cli_ctx: CliContext, artifact: Path, dry_run: bool, yes: bool) -> None:
    """Import favorites from ARTIFACT, skipping ones the host already has.

    Overwrites the rollback journal, so only this import can be rolled back.
    """
    config, console, logger = cli_ctx.load()
    connector = cli_ctx.connector(config)
    journal_store = JournalStore(config.journal_path)

    if not dry_run and not yes and journal_store.exists():
        if not console.confirm("A previous import can still be rolled back. Replace its journal?", default=True):
            logger.warning("Import cancelled")
            return

    try:
        report = import_from_file(
            artifact,
            connector,
            journal_store,
            dry_run=dry_run,
            host_id=config.host.host_id,
            logger=logger,
        )
    except FavSyncError as e:
        _fail(console, logger, e)

    console.print_import_report(report)


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_cli_context
def rollback(cli_ctx: CliContext, yes: bool) -> None:
    """Remove the favorites added by the most recent import."""
    config, console, logger = cli_ctx.load()
    connector = cli_ctx.connector(config)
    journal_store = JournalStore(config.journal_path)

    if not yes and journal_store.exists():
        if not console.confirm("Remove the favorites added by the last import?", default=True):
            logger.warning("Rollback cancelled")
            return

    try:
        report = rollback_last_import(connector, journal_store, logger=logger)
    except FavSyncError as e:
        _fail(console, logger, e)

    console.print_rollback_report(report)


@cli.command()
@pass_cli_context
def journal(cli_ctx: CliContext) -> None:
    """Show the rollback journal of the most recent import."""
    config, console, logger = cli_ctx.load()
    journal_store = JournalStore(config.journal_path)

    if not journal_store.exists():
        console.print_info("No rollback journal. Nothing to roll back.")
        return

    try:
        pending = journal_store.load()
    except FavSyncError as e:
        _fail(console, logger, e)

    console.print_journal(pending, str(journal_store.journal_path))


# ============================================================================
# Configuration Commands
# ============================================================================


@cli.group()
def config() -> None:
    """Manage the FavSync configuration file."""
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration")
@click.pass_obj
def config_init(cli_ctx: CliContext, force: bool) -> None:
    """Create a default configuration file."""
    console = create_console(colored=cli_ctx.colored)
    path, created = ensure_config_exists(cli_ctx.config_path, force=force)
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_warning(f"Configuration already exists: {path} (use --force to overwrite)")


@config.command("show")
@pass_cli_context
def config_show(cli_ctx: CliContext) -> None:
    """Show the effective configuration."""
    config, console, _ = cli_ctx.load()
    store_path = cli_ctx.store_path or config.store_path
    console.print_config_summary(
        str(cli_ctx.config_path or get_config_path()),
        str(store_path),
        str(config.journal_path),
    )
    if console.verbose:
        console.print(config.model_dump(mode="json"))


@config.command("check")
@click.pass_obj
def config_check(cli_ctx: CliContext) -> None:
    """Validate the configuration file."""
    console = create_console(colored=cli_ctx.colored)
    is_valid, errors = validate_config_file(cli_ctx.config_path)
    if is_valid:
        console.print_success("Configuration is valid")
        return

    for error in errors:
        console.print_error(error)
    sys.exit(1)


@config.command("path")
@click.pass_obj
def config_path(cli_ctx: CliContext) -> None:
    """Print the configuration file path."""
    click.echo(str(cli_ctx.config_path or get_config_path()))
