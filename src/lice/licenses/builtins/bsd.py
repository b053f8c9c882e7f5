# topmark:header:start
#
#   project      : Lice
#   file         : bsd.py
#   file_relpath : src/lice/licenses/builtins/bsd.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""BSD software licenses."""

from __future__ import annotations

from lice.licenses.model import PER_FILE_NOTICE, LicenseEntry

DISCLAIMER = """
THIS SOFTWARE IS PROVIDED BY THE AUTHOR "AS IS" AND ANY EXPRESS OR IMPLIED
WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
EVENT SHALL THE AUTHOR BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL,
EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT
OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING
IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY
OF SUCH DAMAGE.
"""

BSD3_TEXT = (
    """
BSD 3-Clause License

Copyright (C) {{ date("%Y") }}, {{ author }}
All Rights Reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

    (1) Redistributions of source code must retain the above copyright notice,
    this list of conditions and the following disclaimer.

    (2) Redistributions in binary form must reproduce the above copyright
    notice, this list of conditions and the following disclaimer in the
    documentation and/or other materials provided with the distribution.

    (3) The name of the author may not be used to endorse or promote products
    derived from this software without specific prior written permission.
"""
    + DISCLAIMER
)

FREEBSD_TEXT = (
    """
Copyright {{ date("%Y") }}, {{ author }}
All Rights Reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice, this
   list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.
"""
    + DISCLAIMER
    + """{% if project %}

The views and conclusions contained in the software and documentation are those
of the authors and should not be interpreted as representing official policies,
either expressed or implied, of the {{ project }} Project.
{% endif %}
"""
)

BSD_LICENSES: tuple[LicenseEntry, ...] = (
    LicenseEntry(
        name="Modified BSD license (3-clause)",
        slug="bsd3c",
        url="https://directory.fsf.org/wiki/License:BSD-3-Clause",
        text=BSD3_TEXT,
        per_file=PER_FILE_NOTICE,
    ),
    LicenseEntry(
        name="FreeBSD software license",
        slug="freebsd",
        url="https://www.freebsd.org/copyright/freebsd-license.html",
        text=FREEBSD_TEXT,
        per_file=PER_FILE_NOTICE,
    ),
)
