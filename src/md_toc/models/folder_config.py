"""Per-folder ordering and label overrides."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FolderEntry(BaseModel):
    """One entry of a folder config, possibly with nested entries."""

    name: str
    display_name: str = Field(default="", alias="displayName")
    description: str = ""
    sub_entries: list["FolderEntry"] = Field(default_factory=list, alias="subEntries")

    @property
    def is_leaf(self) -> bool:
        """Whether this entry links to a page rather than grouping entries."""
        return not self.sub_entries

    model_config = ConfigDict(populate_by_name=True)  # Allow both alias and field name


class FolderConfig(BaseModel):
    """Author-supplied manifest for the contents of a folder."""

    display_name: Optional[str] = Field(default=None, alias="displayName")
    entries: list[FolderEntry] = Field(default_factory=list)

    def entry_count(self) -> int:
        """Number of entries at every nesting level."""
        return count_entries(self.entries)

    model_config = ConfigDict(populate_by_name=True)


def count_entries(entries: list[FolderEntry]) -> int:
    """Count entries recursively.

    Args:
        entries: Top-level entries of a config tree.

    Returns:
        Total number of entries, sub-entries included.
    """
    count = 0
    for entry in entries:
        count += count_entries(entry.sub_entries)
        count += 1
    return count
