"""Project paths and defaults, overridable through the environment (or a .env file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

from embeddings.loader import DEFAULT_RESOURCE

load_dotenv()

PROJECT_ROOT = Path(__file__).parent

RESOURCES_DIR = Path(os.getenv("NEWS_TOOLKIT_RESOURCES", PROJECT_ROOT / "resources"))
GLOVE_FILENAME = os.getenv("NEWS_TOOLKIT_GLOVE_FILE", DEFAULT_RESOURCE)
NEWS_DIR = Path(os.getenv("NEWS_TOOLKIT_NEWS_DIR", RESOURCES_DIR / "News"))
NEWS_EXTENSION = os.getenv("NEWS_TOOLKIT_NEWS_EXT", ".htm")

# "skip" logs and drops a bad embedding row, "abort" fails the whole load
ON_MALFORMED = os.getenv("NEWS_TOOLKIT_ON_MALFORMED", "skip")
