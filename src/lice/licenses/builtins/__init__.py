# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/licenses/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Built-in license definitions.

`BUILTIN_LICENSES` is the static table handed to
`lice.licenses.registry.LicenseRegistry` by `lice.licenses.default_registry`.
Adding a license means adding its entries to this table; nothing registers
itself on import.
"""

from __future__ import annotations

from lice.licenses.builtins.apache import APACHE_LICENSES
from lice.licenses.builtins.bsd import BSD_LICENSES
from lice.licenses.builtins.isc import ISC_LICENSES
from lice.licenses.builtins.mit import MIT_LICENSES
from lice.licenses.builtins.unlicense import UNLICENSE_LICENSES
from lice.licenses.model import LicenseEntry

BUILTIN_LICENSES: tuple[LicenseEntry, ...] = (
    *APACHE_LICENSES,
    *BSD_LICENSES,
    *ISC_LICENSES,
    *MIT_LICENSES,
    *UNLICENSE_LICENSES,
)

__all__ = ["BUILTIN_LICENSES"]
