"""kubens - list and switch namespaces of the current context."""

import typer

from kubectx_cli import __version__
from kubectx_cli.commands.parser import KUBENS, parse_args, usage
from kubectx_cli.models.command import (
    Command,
    CurrentCommand,
    HelpCommand,
    ListCommand,
    SwapCommand,
    SwitchCommand,
    VersionCommand,
)
from kubectx_cli.models.exceptions import UsageError
from kubectx_cli.services.config_service import get_config_service
from kubectx_cli.services.selection_manager import get_namespace_swap_service
from kubectx_cli.services.swap_service import SwapService
from kubectx_cli.utils.exit_codes import ERROR_GENERAL
from kubectx_cli.utils.ui.formatters import (
    format_info,
    format_plain,
    format_selection_list,
    format_success,
    format_warning,
)

from .decorators import command_wrapper
from .kubectx_command import CONTEXT_SETTINGS

app = typer.Typer(
    name=KUBENS,
    help="Switch between namespaces of the current context",
    add_completion=False,
)


@app.command(context_settings=CONTEXT_SETTINGS)
@command_wrapper(tool=KUBENS)
def kubens(
    args: list[str] | None = typer.Argument(None, help="See 'kubens -h'"),
) -> None:
    """Switch between namespaces of the current context."""
    command = parse_args(args or [], KUBENS)
    if isinstance(command, HelpCommand):
        format_info(usage(KUBENS))
        raise typer.Exit(ERROR_GENERAL)
    if isinstance(command, VersionCommand):
        format_plain(__version__)
        return

    run(command, get_namespace_swap_service(notify=format_warning))


def run(command: Command, swap: SwapService) -> None:
    """Execute a parsed kubens command."""
    if isinstance(command, ListCommand):
        config = get_config_service().config
        format_selection_list(
            swap.list_all(),
            swap.current(),
            style=config.current_style,
            color=config.color,
        )
    elif isinstance(command, CurrentCommand):
        format_plain(swap.current())
    elif isinstance(command, SwitchCommand):
        name = swap.set_active(command.name)
        format_success(f'Active namespace is "{name}".')
    elif isinstance(command, SwapCommand):
        name = swap.swap_to_previous()
        format_success(f'Active namespace is "{name}".')
    else:
        raise UsageError(f"unsupported command for {KUBENS}")
