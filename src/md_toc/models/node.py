"""Documentation node tree built from a markdown source tree."""

import weakref
from typing import Iterator, Optional

from md_toc.exceptions import NodeTreeError
from md_toc.models.folder_config import FolderConfig


class MDNode:
    """Shared state of a file or folder in the documentation tree.

    Nodes are attached through ``MDFolder.add_child``. The parent holds its
    children; a child only keeps a weak reference back to its parent.
    """

    def __init__(
        self,
        display_name: str,
        relative_path: str = "",
        description: str = "",
        href: str = "",
        exclude_from_toc: bool = False,
    ):
        self.display_name = display_name
        self.relative_path = relative_path
        self.description = description
        self.href = href
        self.exclude_from_toc = exclude_from_toc
        self.depth = 0
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional["MDFolder"]:
        """The owning folder, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_folder(self) -> bool:
        return False

    def ancestors(self) -> Iterator["MDFolder"]:
        """Yield the parent chain, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name='{self.display_name}', "
            f"path='{self.relative_path}', depth={self.depth})"
        )


class MDFile(MDNode):
    """A single markdown page."""


class MDFolder(MDNode):
    """A directory of pages, optionally described by a FolderConfig."""

    def __init__(
        self,
        display_name: str,
        relative_path: str = "",
        description: str = "",
        href: str = "",
        exclude_from_toc: bool = False,
        config: Optional[FolderConfig] = None,
    ):
        super().__init__(
            display_name=display_name,
            relative_path=relative_path,
            description=description,
            href=href,
            exclude_from_toc=exclude_from_toc,
        )
        self.config = config
        self._children: list[MDNode] = []

    @property
    def is_folder(self) -> bool:
        return True

    @property
    def children(self) -> tuple[MDNode, ...]:
        """Children in discovery order."""
        return tuple(self._children)

    def add_child(self, node: MDNode) -> MDNode:
        """Attach a node as the last child of this folder.

        The child only holds a weak reference to this folder, so keep a strong
        reference to the tree root for as long as the tree is used. In
        ``MDFolder("Docs").add_child(page)`` the temporary folder is collected
        right away; ``page.parent`` then returns None and the page is treated
        as a tree root by exclusion checks and TOC root resolution.

        Args:
            node: File or folder to attach. Its depth, and the depth of its
                descendants, is recomputed from this folder.

        Returns:
            The attached node.

        Raises:
            NodeTreeError: If the node already has a parent, or attaching it
                would create a cycle.
        """
        if node.parent is not None:
            raise NodeTreeError(
                f"{node.display_name!r} is already attached to "
                f"{node.parent.display_name!r}"
            )
        if node is self or any(ancestor is node for ancestor in self.ancestors()):
            raise NodeTreeError(
                f"Attaching {node.display_name!r} to {self.display_name!r} "
                "would create a cycle"
            )

        node._parent = weakref.ref(self)
        self._children.append(node)
        _set_depth(node, self.depth + 1)
        return node

    def walk(self) -> Iterator[MDNode]:
        """Yield this folder and all descendants depth-first."""
        yield self
        for child in self._children:
            if isinstance(child, MDFolder):
                yield from child.walk()
            else:
                yield child

    def find(self, relative_path: str) -> Optional[MDNode]:
        """Find the first descendant with the given relative path."""
        for node in self.walk():
            if node.relative_path == relative_path:
                return node
        return None

    def __repr__(self) -> str:
        return (
            f"MDFolder(name='{self.display_name}', path='{self.relative_path}', "
            f"depth={self.depth}, children={len(self._children)})"
        )


def _set_depth(node: MDNode, depth: int) -> None:
    node.depth = depth
    if isinstance(node, MDFolder):
        for child in node._children:
            _set_depth(child, depth + 1)
