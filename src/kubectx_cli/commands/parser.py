"""Command-line argument parser for kubectx and kubens.

The historic syntax (``-`` to swap, ``new=old`` to rename, ``.`` for the
current selection) does not fit option parsers well, so Typer hands the raw
arguments here and this module turns them into a ``Command``.
"""

from __future__ import annotations

from kubectx_cli.models.command import (
    Command,
    CurrentCommand,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    RenameCommand,
    Sentinel,
    SwapCommand,
    SwitchCommand,
    Target,
    UnsetCommand,
    VersionCommand,
)
from kubectx_cli.models.exceptions import UsageError

KUBECTX = "kubectx"
KUBENS = "kubens"

CURRENT_MARKER = "."

KUBECTX_USAGE = """\
USAGE:
  kubectx                   : list the contexts
  kubectx <NAME>            : switch to context <NAME>
  kubectx -                 : switch to the previous context
  kubectx -c, --current     : show the current context name
  kubectx <NEW_NAME>=<NAME> : rename context <NAME> to <NEW_NAME>
  kubectx <NEW_NAME>=.      : rename current-context to <NEW_NAME>
  kubectx -u, --unset       : unset the current context
  kubectx -d <NAME> [<NAME...>] : delete context <NAME> ('.' for current-context)
                                  (this command won't delete the user/cluster entry
                                  referenced by the context entry)
  kubectx -h, --help        : show this message
  kubectx -V, --version     : show version"""

KUBENS_USAGE = """\
USAGE:
  kubens                    : list the namespaces in the current context
  kubens <NAME>             : change the active namespace of current context
  kubens -                  : switch to the previous namespace in this context
  kubens -c, --current      : show the current namespace
  kubens -h, --help         : show this message
  kubens -V, --version      : show version"""

_SIMPLE_FLAGS: dict[str, type] = {
    "-": SwapCommand,
    "-c": CurrentCommand,
    "--current": CurrentCommand,
    "-h": HelpCommand,
    "--help": HelpCommand,
    "-V": VersionCommand,
    "--version": VersionCommand,
}

_KUBECTX_ONLY_FLAGS: dict[str, type] = {
    "-u": UnsetCommand,
    "--unset": UnsetCommand,
}


def usage(tool: str) -> str:
    return KUBENS_USAGE if tool == KUBENS else KUBECTX_USAGE


def _target(value: str) -> Target:
    return Sentinel.CURRENT if value == CURRENT_MARKER else value


def _parse_rename(arg: str) -> RenameCommand:
    new, _, old = arg.partition("=")
    if not new or not old:
        raise UsageError(f"invalid rename syntax '{arg}', expected <NEW_NAME>=<NAME>")
    return RenameCommand(old=_target(old), new=new)


def parse_args(args: list[str] | tuple[str, ...], tool: str = KUBECTX) -> Command:
    """Parse raw arguments into a command.

    Raises:
        UsageError: For unknown flags, missing operands or extra arguments
    """
    args = list(args)
    if not args:
        return ListCommand()

    first = args[0]
    if first == "-d":
        if tool != KUBECTX:
            raise UsageError("unsupported option '-d'")
        if len(args) == 1:
            raise UsageError("missing context NAME for -d")
        return DeleteCommand(names=tuple(_target(name) for name in args[1:]))

    if len(args) > 1:
        raise UsageError("too many arguments")

    if first in _SIMPLE_FLAGS:
        return _SIMPLE_FLAGS[first]()
    if tool == KUBECTX and first in _KUBECTX_ONLY_FLAGS:
        return _KUBECTX_ONLY_FLAGS[first]()
    if first.startswith("-"):
        raise UsageError(f"unsupported option '{first}'")

    if "=" in first:
        if tool != KUBECTX:
            raise UsageError("namespaces cannot be renamed")
        return _parse_rename(first)

    return SwitchCommand(name=first)
