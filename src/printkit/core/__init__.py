# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, profile-agnostic primitives of Printkit.

Included modules:

- ``sinks``
  The sink capability protocol, the nominal ``TextSink``/``JsonSink`` stream
  adapters, and the anonymous adapter used to intercept fragments.

- ``printer``
  The opaque, replayable ``Printer`` value.

- ``algebra``
  The ``Print`` combinators (string, number, sequence, intersperse, bracket).

- ``escaping``
  JSON string-content escaping.

- ``errors``
  Exceptions raised by the library itself (never by sinks).

Design goals:

- Building a printer performs no I/O; effects only happen in ``Printer.run``.
- No shared mutable state, so printers can be reused across threads.
"""

from __future__ import annotations
