"""Console entry points for kubectx and kubens."""

from kubectx_cli.commands import kubectx_command, kubens_command


def kubectx():
    """Entry point for the kubectx command."""
    kubectx_command.app(prog_name="kubectx")


def kubens():
    """Entry point for the kubens command."""
    kubens_command.app(prog_name="kubens")


if __name__ == "__main__":
    kubectx()
