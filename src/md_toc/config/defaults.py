"""Default configuration values for md-toc."""

from pathlib import Path

# Default configuration file name
DEFAULT_CONFIG_FILENAME = "md-toc.config.json"

# Search paths for configuration file (in order of priority)
CONFIG_SEARCH_PATHS = [
    Path.cwd() / DEFAULT_CONFIG_FILENAME,
    Path.home() / ".config" / "md-toc" / "config.json",
]

# CSS classes of rendered <li> elements
DEFAULT_FOLDER_CLASS = "folder"
DEFAULT_FILE_CLASS = "file"

# Spaces per depth level in front of each <li>
DEFAULT_INDENT_WIDTH = 4

# Environment variables read by the loader
ENV_PREFIX = "MD_TOC_"
