# topmark:header:start
#
#   project      : Lice
#   file         : isc.py
#   file_relpath : src/lice/licenses/builtins/isc.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""The ISC license."""

from __future__ import annotations

from lice.licenses.model import PER_FILE_NOTICE, LicenseEntry

ISC_TEXT = """
ISC License

Copyright (c) {{ date("%Y") }}, {{ author }}

Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted, provided that the above
copyright notice and this permission notice appear in all copies.

THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
"""

ISC_LICENSES: tuple[LicenseEntry, ...] = (
    LicenseEntry(
        name="ISC License",
        slug="isc",
        url="https://directory.fsf.org/wiki/License:ISC",
        text=ISC_TEXT,
        per_file=PER_FILE_NOTICE,
    ),
)
