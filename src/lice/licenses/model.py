# topmark:header:start
#
#   project      : Lice
#   file         : model.py
#   file_relpath : src/lice/licenses/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""License entries and the render context substituted into their templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

# Generic per-file notice for licenses without more specific language.
PER_FILE_NOTICE: str = """
Copyright (C) {{ date("%Y") }} {{ author }}. All Rights Reserved.
"""


@dataclass(frozen=True)
class LicenseEntry:
    """A software license definition.

    Attributes:
        name (str): Human-readable name, e.g. "Apache License, Version 2.0".
        slug (str): Short unique identifier, ideally one word with no spaces.
        text (str): Template of the full license text.
        url (str | None): Link to a description of the license.
        per_file (str | None): Template of the notice inserted at the top of each
            covered file, or None if the license has none.
    """

    name: str
    slug: str
    text: str
    url: str | None = None
    per_file: str | None = None

    @property
    def has_per_file(self) -> bool:
        """Whether this license defines a per-file notice."""
        return bool(self.per_file)


@dataclass(frozen=True)
class RenderContext:
    """Values expanded into license templates.

    Attributes:
        author (str | None): Name of the copyright holder; None when unknown.
        project (str | None): Project name, if different from the author (e.g. "FreeBSD").
        time (datetime): The point in time rendered by the ``date``/``time`` functions.
    """

    author: str | None
    project: str | None = None
    time: datetime = field(default_factory=datetime.now)
