"""Chief public API surface.

Embed the project CLI with ``chief_cli(name, version)``; the environment and
logging helpers are re-exported for applications that use Chief as a library.
"""

from .cli import chief_cli, run_cli
from .config import env_var, load_dotenv
from .exceptions import ChiefError, LaunchError
from .utils.logging_setup import get_logger, setup_logging
from .version import __version__

__all__ = [
    "ChiefError",
    "LaunchError",
    "__version__",
    "chief_cli",
    "env_var",
    "get_logger",
    "load_dotenv",
    "run_cli",
    "setup_logging",
]
