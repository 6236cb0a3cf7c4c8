"""Delimited text codec for :class:`~cmdnotes.core.models.Command`.

Stored layout (UTF-8)::

    id,technology,command,reason,timestamp

The timestamp is written with :meth:`datetime.isoformat`, which
:meth:`datetime.fromisoformat` reads back without loss.

Rules
-----
* Free-text fields are NOT escaped.  A comma inside a field shifts the
  field boundaries on decode; this is an accepted limitation.
* Decoding is tolerant: an unparsable ID becomes ``0`` and an unparsable
  timestamp becomes :data:`~cmdnotes.core.models.ZERO_TIME`.
* Only a value with fewer than five fields is rejected, with
  :class:`~cmdnotes.exceptions.MalformedRecordError`.
"""

from __future__ import annotations

import struct
from datetime import datetime

from cmdnotes.core.models import ZERO_TIME, Command
from cmdnotes.exceptions import MalformedRecordError

DELIMITER: str = ","
FIELD_COUNT: int = 5

_KEY = struct.Struct(">Q")


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

def itob(value: int) -> bytes:
    """Return the 8-byte big-endian encoding of *value*.

    Big-endian keys sort bytewise in numeric order, so iterating a bucket
    by key yields records in ID order.
    """
    return _KEY.pack(value)


def btoi(key: bytes) -> int:
    """Inverse of :func:`itob`."""
    return _KEY.unpack(key)[0]


# ---------------------------------------------------------------------------
# Record encoding
# ---------------------------------------------------------------------------

def encode(record: Command) -> bytes:
    """Serialize *record* into its delimited byte form."""
    fields = (
        str(record.id),
        record.technology,
        record.command,
        record.reason,
        record.date_added.isoformat(),
    )
    return DELIMITER.join(fields).encode("utf-8")


def decode(data: bytes) -> Command:
    """Deserialize a delimited value produced by :func:`encode`.

    Raises
    ------
    MalformedRecordError
        If *data* holds fewer than five delimited fields.
    """
    parts = data.decode("utf-8", errors="replace").split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        raise MalformedRecordError(
            f"Stored record has {len(parts)} fields, expected {FIELD_COUNT}.",
            hint="The store file may have been modified by another program.",
        )

    return Command(
        id=_parse_id(parts[0]),
        technology=parts[1],
        command=parts[2],
        reason=parts[3],
        date_added=_parse_timestamp(parts[4]),
    )


def _parse_id(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _parse_timestamp(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return ZERO_TIME


class CommandCodec:
    """Concrete :class:`~cmdnotes.core.protocols.RecordCodec`.

    Thin object wrapper over :func:`encode` / :func:`decode` so the
    repository can receive the encoding by injection.
    """

    def encode(self, record: Command) -> bytes:
        return encode(record)

    def decode(self, data: bytes) -> Command:
        return decode(data)
