"""
Static application-level constants: the application version and the base
directory of the project.
"""

import os
from pathlib import Path

from logjob import __version__

APP_VERSION = __version__
"""The current version of the logjob application."""

CWD = Path(__file__).parent

BASE_DIR = Path(os.getenv("BASE_DIR", CWD.parent.parent.parent))
"""The base directory of the logjob project (where `.env` lives)."""
