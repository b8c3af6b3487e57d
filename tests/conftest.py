"""Pytest configuration and fixtures."""

import pytest

from md_toc.models import FolderConfig, FolderEntry, MDFile, MDFolder


@pytest.fixture
def site() -> dict:
    """Build a small documentation tree.

    Docs (0)
      Guide (1)
        Intro (2)
        Setup (2)
        Advanced (2)
          Tuning (3)
          Caching (3)
      Reference (1)
        index (2)
      About (1)

    The dict keeps a strong reference to the root so the tree stays alive.
    """
    root = MDFolder("Docs", relative_path="", href="index")

    guide = root.add_child(MDFolder("Guide", relative_path="guide/", href="index"))
    intro = guide.add_child(
        MDFile("Intro", relative_path="guide/intro.html", description="Getting started")
    )
    setup = guide.add_child(
        MDFile("Setup", relative_path="guide/setup.html", description="Install")
    )
    advanced = guide.add_child(
        MDFolder("Advanced", relative_path="guide/advanced/", href="index")
    )
    tuning = advanced.add_child(
        MDFile("Tuning", relative_path="guide/advanced/tuning.html", description="Tune it")
    )
    caching = advanced.add_child(
        MDFile("Caching", relative_path="guide/advanced/caching.html", description="Cache it")
    )

    reference = root.add_child(
        MDFolder("Reference", relative_path="reference/", href="index")
    )
    reference_index = reference.add_child(
        MDFile("Reference", relative_path="reference/index.html", description="API")
    )

    about = root.add_child(MDFile("About", relative_path="about.html", description="Who"))

    return {
        "root": root,
        "guide": guide,
        "intro": intro,
        "setup": setup,
        "advanced": advanced,
        "tuning": tuning,
        "caching": caching,
        "reference": reference,
        "reference_index": reference_index,
        "about": about,
    }


@pytest.fixture
def nested_config() -> FolderConfig:
    """Config with two top-level entries, one of them holding three sub-entries."""
    return FolderConfig(
        display_name="The Guide",
        entries=[
            FolderEntry(
                name="basics",
                display_name="Basics",
                sub_entries=[
                    FolderEntry(name="a.html", display_name="A", description="First"),
                    FolderEntry(name="b.html", display_name="B", description="Second"),
                    FolderEntry(name="c.html", display_name="C", description="Third"),
                ],
            ),
            FolderEntry(name="faq.html", display_name="FAQ", description="Questions"),
        ],
    )
