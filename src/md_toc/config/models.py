"""Pydantic settings model for the TOC renderer."""

from pydantic import BaseModel, ConfigDict, Field

from md_toc.config.defaults import (
    DEFAULT_FILE_CLASS,
    DEFAULT_FOLDER_CLASS,
    DEFAULT_INDENT_WIDTH,
)


class TocSettings(BaseModel):
    """Markup settings for rendered tables of contents.

    The defaults reproduce the markup expected by existing page templates.
    """

    folder_class: str = DEFAULT_FOLDER_CLASS
    file_class: str = DEFAULT_FILE_CLASS
    indent_width: int = Field(default=DEFAULT_INDENT_WIDTH, ge=0, le=16)
    nested_list_indent: int = Field(default=2, ge=0, le=16)
    html_suffix: str = ".html"
    collapsible_href: str = "#"

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file
