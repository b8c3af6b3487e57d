"""Custom exceptions for md-toc."""


class MdTocError(Exception):
    """Base exception for md-toc operations."""


class NodeTreeError(MdTocError):
    """A node could not be attached without breaking the tree shape."""


class SettingsError(MdTocError):
    """A settings file could not be read or validated."""
