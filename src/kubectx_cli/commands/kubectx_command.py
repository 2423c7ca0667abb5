"""kubectx - list, switch, rename and delete kubeconfig contexts."""

import typer

from kubectx_cli import __version__
from kubectx_cli.commands.parser import KUBECTX, parse_args, usage
from kubectx_cli.models.command import (
    Command,
    CurrentCommand,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    RenameCommand,
    SwapCommand,
    SwitchCommand,
    UnsetCommand,
    VersionCommand,
)
from kubectx_cli.services.config_service import get_config_service
from kubectx_cli.services.selection_manager import get_context_swap_service
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

# -h/--help and unknown flags are handled by the parser, not by Click
CONTEXT_SETTINGS = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}

app = typer.Typer(
    name=KUBECTX,
    help="Switch between kubeconfig contexts",
    add_completion=False,
)


@app.command(context_settings=CONTEXT_SETTINGS)
@command_wrapper(tool=KUBECTX)
def kubectx(
    args: list[str] | None = typer.Argument(None, help="See 'kubectx -h'"),
) -> None:
    """Switch between kubeconfig contexts."""
    command = parse_args(args or [], KUBECTX)
    if isinstance(command, HelpCommand):
        format_info(usage(KUBECTX))
        raise typer.Exit(ERROR_GENERAL)
    if isinstance(command, VersionCommand):
        format_plain(__version__)
        return

    run(command, get_context_swap_service(notify=format_warning))


def run(command: Command, swap: SwapService) -> None:
    """Execute a parsed kubectx command."""
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
        format_success(f'Switched to context "{name}".')
    elif isinstance(command, SwapCommand):
        name = swap.swap_to_previous()
        format_success(f'Switched to context "{name}".')
    elif isinstance(command, RenameCommand):
        old = swap.rename(command.old, command.new)
        format_success(f'Context "{old}" renamed to "{command.new}".')
    elif isinstance(command, DeleteCommand):
        for result in swap.delete(command.names):
            format_success(f'Deleted context "{result.name}".')
            if result.was_active:
                format_warning(
                    "You deleted the current context. "
                    "Use 'kubectx' to select a different one."
                )
    elif isinstance(command, UnsetCommand):
        swap.unset()
        format_success("Active context unset for kubectl.")
