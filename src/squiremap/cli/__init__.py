"""Command-line interface for the waypoint map drawer."""

import logging
import sys
import typer

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

# Create typer app
app = typer.Typer(invoke_without_command=True, no_args_is_help=True,
                  help="Waypoint map drawer - renders bot profiles onto zone maps")

# Import commands
from .draw import draw
from .info import info
from .addon import addon
from .zones import zones

if __name__ == "__main__":
    app()
