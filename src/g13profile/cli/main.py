"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from g13profile import __version__
from g13profile.exceptions import DaemonError, G13ProfileError, format_error_for_display

logger = logging.getLogger(__name__)

PROG_NAME = "g13"
EXIT_INTERRUPTED = 130


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Stdout carries daemon output and key-maps, so logs only go to stderr
    when asked for with -v, and to a rotating file with --log-file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Log file path (optional)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers: list[logging.Handler] = []
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5
            )
        )
    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


def report_error(error: Exception, verbose: int) -> None:
    """Print ``g13: <message>`` to stderr, with the recovery hint when verbose."""
    click.echo(f"{PROG_NAME}: {format_error_for_display(error, with_hint=bool(verbose))}", err=True)


def run_session(profile, app_config, spawn_daemon: bool) -> None:
    """
    Start the daemon, attach to its pipes and run the reactor.

    The daemon is always terminated on the way out; Ctrl+C exits with
    EXIT_INTERRUPTED.
    """
    from g13profile.core import ProtocolReactor
    from g13profile.daemon import DaemonProcess, FifoChannel, wait_for_channel

    daemon = DaemonProcess(app_config.daemon_command, app_config.terminate_timeout) if spawn_daemon else None

    try:
        if daemon is not None:
            daemon.start()

        wait_for_channel(
            app_config.output_pipe,
            poll_interval=app_config.poll_interval,
            timeout=app_config.startup_timeout,
        )

        with FifoChannel.open(app_config.input_pipe, app_config.output_pipe) as channel:
            reactor = ProtocolReactor(
                profile,
                channel,
                wrap_modes=app_config.wrap_modes,
                diagnostics=lambda message: click.echo(f"{PROG_NAME}: {message}", err=True),
            )
            reactor.run()

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(EXIT_INTERRUPTED)

    finally:
        if daemon is not None:
            daemon.terminate()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME, message="%(prog)s:v%(version)s")
@click.option(
    '-c', '--config-dir',
    type=click.Path(exists=True, file_okay=False, readable=True, path_type=Path),
    default=None,
    help="Check for profile configs in DIR (default: ~/.config/g13)"
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Log to stderr (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--daemon/--no-daemon',
    'spawn_daemon',
    default=True,
    help='Start g13d (default) or attach to one that is already running'
)
@click.option(
    '--dry-run',
    is_flag=True,
    help='Print the starting mode commands and key-map, then exit'
)
@click.argument('profile', required=False)
def cli(
    config_dir: Optional[Path],
    verbose: int,
    log_file: Optional[Path],
    spawn_daemon: bool,
    dry_run: bool,
    profile: Optional[str]
):
    """
    g13d wrapper script and profile manager.

    Loads PROFILE (a TOML file in the config directory, with or without the
    .toml extension), sends its starting mode to g13d and switches modes
    whenever the daemon asks for it. Use -- to pass a PROFILE that starts
    with a dash.

    \b
    Examples:
      # Load ~/.config/g13/default.toml
      g13

      # Load a profile from another directory
      g13 -c ./profiles gaming

      # Show what would be sent
      g13 --dry-run gaming
    """
    from g13profile.compiler import ModeCompiler
    from g13profile.loader import resolve_and_load
    from g13profile.models import AppConfig

    setup_logging(verbose, log_file)

    try:
        app_config = AppConfig.load_or_default()
        directory = (config_dir or app_config.config_dir).expanduser()
        loaded = resolve_and_load(directory, profile or app_config.default_profile)

        if dry_run:
            compiled = ModeCompiler(loaded).compile(loaded.starting_mode)
            for command in compiled.commands:
                click.echo(command)
            if compiled.rendering is not None:
                click.echo(compiled.rendering, nl=False)
            return

        run_session(loaded, app_config, spawn_daemon)

    except G13ProfileError as e:
        logger.error(e.technical_message)
        report_error(e, verbose)
        sys.exit(e.exit_code)
    except OSError as e:
        # Profile and config reads are already wrapped; this is the daemon pipes
        logger.exception("Error talking to the daemon")
        report_error(e, verbose)
        sys.exit(DaemonError.exit_code)


if __name__ == "__main__":
    cli()
