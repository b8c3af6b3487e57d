"""md-toc.

Renders the navigation table of contents for pages of a markdown
documentation site as nested HTML lists. Folders are listed from the pages
discovered on disk or, when it declares more entries, from the folder's
configuration.
"""

__version__ = "0.1.0"

from md_toc.models import FolderConfig, FolderEntry, MDFile, MDFolder, MDNode
from md_toc.toc import TocCreator, TocFromNodesCreator, create_toc_for_node

__all__ = [
    "__version__",
    "FolderConfig",
    "FolderEntry",
    "MDFile",
    "MDFolder",
    "MDNode",
    "TocCreator",
    "TocFromNodesCreator",
    "create_toc_for_node",
]
