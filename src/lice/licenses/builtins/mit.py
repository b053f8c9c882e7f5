# topmark:header:start
#
#   project      : Lice
#   file         : mit.py
#   file_relpath : src/lice/licenses/builtins/mit.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""The MIT (Expat) software license."""

from __future__ import annotations

from lice.licenses.model import PER_FILE_NOTICE, LicenseEntry

MIT_TEXT = """
Copyright (c) {{ date("%Y") }} {{ author }}

Permission is hereby granted, free of charge, to any person obtaining
a copy of this software and associated documentation files (the
"Software"), to deal in the Software without restriction, including
without limitation the rights to use, copy, modify, merge, publish,
distribute, sublicense, and/or sell copies of the Software, and to
permit persons to whom the Software is furnished to do so, subject to
the following conditions:

The above copyright notice and this permission notice shall be
included in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

MIT_LICENSES: tuple[LicenseEntry, ...] = (
    LicenseEntry(
        name="MIT License (Expat)",
        slug="mit-expat",
        url="https://directory.fsf.org/wiki/License:Expat",
        text=MIT_TEXT,
        per_file=PER_FILE_NOTICE,
    ),
)
