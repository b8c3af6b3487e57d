"""Render a table of contents as nested HTML lists from the node tree.

The TOC shown on a page always covers the page's whole top-level section.
Each folder is rendered either from its discovered children or from its
FolderConfig entries, whichever describes more items; ties go to the
discovered children.

Interpolated names, descriptions and paths are not HTML-escaped.
"""

from typing import Optional, Protocol

from md_toc.config.models import TocSettings
from md_toc.models.folder_config import FolderEntry, count_entries
from md_toc.models.node import MDFolder, MDNode
from md_toc.utils.logging import get_logger

logger = get_logger("toc.renderer")


class TocCreator(Protocol):
    """Anything that can produce the TOC fragment for a page."""

    def create_toc_for_node(self, root: MDFolder, node: MDNode) -> str:
        ...


class TocSink:
    """Accumulates markup for a single render call."""

    def __init__(self):
        self._parts: list[str] = []

    def write(self, *parts: str) -> None:
        self._parts.extend(parts)

    def getvalue(self) -> str:
        return "".join(self._parts)


def resolve_toc_root(node: MDNode) -> MDNode:
    """Walk up to the nearest ancestor at depth <= 1.

    Args:
        node: The page the TOC is rendered for.

    Returns:
        The node whose subtree the TOC shows.
    """
    current = node
    while current.parent is not None and current.depth > 1:
        current = current.parent
    return current


def is_hidden(node: MDNode) -> bool:
    """Whether the node or one of its ancestors is excluded from the TOC.

    The absolute root of the tree (the node without a parent) is never
    checked, so an excluded root does not hide anything.
    """
    current = node
    while current.parent is not None:
        if current.exclude_from_toc:
            return True
        current = current.parent
    return False


def relative_prefix(depth: int) -> str:
    """Return the "../" climbs needed from a page at the given depth."""
    return "../" * max(0, depth - 1)


class TocFromNodesCreator:
    """Creates TOC markup from MDNode trees and their folder configs."""

    def __init__(self, settings: Optional[TocSettings] = None):
        """Initialize the creator.

        Args:
            settings: Markup settings. Defaults reproduce the standard markup.
        """
        self.settings = settings or TocSettings()

    def create_toc_for_node(self, root: MDFolder, node: MDNode) -> str:
        """Render the TOC visible from a page.

        Args:
            root: Root of the whole documentation tree.
            node: The page being rendered. Its depth is the base for
                relative links to discovered pages.

        Returns:
            A complete ``<ul>...</ul>`` fragment.
        """
        toc_root = resolve_toc_root(node)
        logger.debug(
            f"TOC for {node.relative_path!r} under {root.display_name!r} "
            f"rooted at {toc_root.display_name!r}"
        )

        list_margin = " " * self.settings.nested_list_indent
        sink = TocSink()
        sink.write(list_margin, "<ul>\n")
        self.render(toc_root, sink, node)
        sink.write(list_margin, "</ul>\n")
        return sink.getvalue()

    def render(self, node: MDNode, sink: TocSink, toc_node: MDNode) -> None:
        """Append the markup for ``node`` and its visible descendants.

        Args:
            node: Node to render.
            sink: Output for this render call.
            toc_node: The page the TOC is rendered for.
        """
        if is_hidden(toc_node) or is_hidden(node):
            logger.debug(f"Skipping excluded node {node.relative_path!r}")
            return

        margin = self._margin(node)

        if isinstance(node, MDFolder):
            entries = node.config.entries if node.config is not None else []
            children = node.children
            entry_count = count_entries(entries)

            if len(children) >= entry_count:
                self._write_from_nodes(node, sink, toc_node, margin, children)
            else:
                logger.debug(
                    f"Rendering {node.relative_path!r} from folder config "
                    f"({len(children)} children < {entry_count} entries)"
                )
                has_children = node.depth > 1
                if has_children:
                    self._open_node(
                        self.settings.collapsible_href,
                        node.display_name,
                        sink,
                        margin,
                        has_children,
                    )
                self._write_from_config(node, sink, margin, entries)
                if has_children:
                    self._close_node(sink, margin, has_children)
        else:
            relative_url = relative_prefix(toc_node.depth) + self._page_path(node)
            sink.write(
                margin,
                f"<li class='{self.settings.file_class}'>",
                f"<a href='{relative_url}' title='{node.description}'>"
                f"{node.display_name}</a>",
                "</li>\n",
            )

    def _page_path(self, node: MDNode) -> str:
        # Pages that are their folder's landing file link to the folder itself.
        parent = node.parent
        if parent is None or not parent.href:
            return node.relative_path
        return node.relative_path.replace(parent.href + self.settings.html_suffix, "")

    def _write_from_config(
        self,
        node: MDFolder,
        sink: TocSink,
        margin: str,
        entries: list[FolderEntry],
    ) -> None:
        # Config links are relative to the folder being listed, not the page.
        for entry in entries:
            if entry.is_leaf:
                relative_url = (
                    relative_prefix(node.depth) + node.relative_path + entry.name
                )
                sink.write(
                    margin,
                    f"<li class='{self.settings.file_class}'>",
                    f"<a href='{relative_url}' title='{entry.description}'>"
                    f"{entry.display_name}</a>",
                    "</li>\n",
                )
            else:
                self._open_node(
                    self.settings.collapsible_href, entry.display_name, sink, margin, True
                )
                self._write_from_config(node, sink, margin, entry.sub_entries)
                self._close_node(sink, margin, True)

    def _write_from_nodes(
        self,
        node: MDFolder,
        sink: TocSink,
        toc_node: MDNode,
        margin: str,
        children: tuple[MDNode, ...],
    ) -> None:
        write_node = node.depth > 1 or (node.depth == 1 and len(children) == 1)
        has_more_than_one_child = len(children) > 1

        if write_node:
            if has_more_than_one_child:
                self._open_node(
                    self.settings.collapsible_href, node.display_name, sink, margin, True
                )
            else:
                self._open_folder_node(node, sink, margin)

        if has_more_than_one_child:
            for child in children:
                self.render(child, sink, toc_node)

        if write_node:
            self._close_node(sink, margin, has_more_than_one_child)

    def _open_folder_node(self, node: MDFolder, sink: TocSink, margin: str) -> None:
        """Open a folder under its own link, preferring the config's label."""
        config = node.config
        if config is None or not config.display_name:
            display_name = node.display_name
        else:
            display_name = config.display_name

        self._open_node(
            node.relative_path, display_name, sink, margin, len(node.children) > 1
        )

    def _open_node(
        self,
        relative_path: str,
        display_name: str,
        sink: TocSink,
        margin: str,
        has_children: bool,
    ) -> None:
        css_class = self.settings.folder_class if has_children else self.settings.file_class
        sink.write(
            margin,
            f"<li class='{css_class}'>",
            f"<a href='{relative_path}'>{display_name}</a>\n",
        )
        if has_children:
            sink.write(margin, " " * self.settings.nested_list_indent, "<ul>\n")

    def _close_node(self, sink: TocSink, margin: str, has_children: bool) -> None:
        if has_children:
            sink.write(margin, " " * self.settings.nested_list_indent, "</ul>\n")
        sink.write(margin, "</li>\n")

    def _margin(self, node: MDNode) -> str:
        return " " * (self.settings.indent_width * node.depth)


def create_toc_for_node(root: MDFolder, node: MDNode) -> str:
    """Render the TOC for ``node`` with default settings."""
    return TocFromNodesCreator().create_toc_for_node(root, node)
