from covwire.cli.entry import cli
from covwire.cli.errors import EXIT_CONFIG, EXIT_OK

__all__ = ["EXIT_CONFIG", "EXIT_OK", "cli"]
