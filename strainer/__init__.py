"""
Strainer - A value filtering library.
"""

import sys
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

__version__ = "1.0.0"

# Global configuration state
_config = {
    "verbose": False,
}


def _exception_handler(
    exc_type: type, exc_value: BaseException, exc_traceback: Any
) -> None:
    """
    Report uncaught errors as a single "Type: message" line.

    Configuration mistakes such as an unknown option key surface as
    InvalidArgumentError; outside verbose mode only its message is shown.
    """
    if _config["verbose"]:
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
    else:
        print(f"{exc_type.__name__}: {exc_value}")


def configure(
    env_file_path: Optional[str] = None,
    verbose: bool = False,
    **kwargs: Any,
) -> bool:
    """
    Configure Strainer for the current process.

    Filter defaults are read from the environment when a filter is created,
    e.g. STRAINER_DEFAULT_ENCODING for UpperCaseWords. This function loads
    them from a .env file so they can be set per deployment.

    Args:
        env_file_path (str, optional): Path to the .env file holding STRAINER_*
            settings. If None, python-dotenv searches the current directory
            and its parents.
        verbose (bool): If True, uncaught filter errors print their full
            traceback. If False (default), only "Type: message" is printed.
        **kwargs: Accepted and ignored.

    Returns:
        bool: True if a .env file was found and loaded, False otherwise.
    """
    _config["verbose"] = verbose
    sys.excepthook = _exception_handler

    if env_file_path:
        env_file = Path(env_file_path)
        if env_file.exists():
            return load_dotenv(dotenv_path=env_file)
        return False

    return load_dotenv()
