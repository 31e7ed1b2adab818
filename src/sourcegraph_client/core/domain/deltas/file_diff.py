"""File-level diff records as produced by the server-side diff component.

Hunk bodies are raw bytes on the server, so they arrive base64-encoded under
the ``Body`` key. Models built in Python take the decoded text as ``body``.
Bodies that are not valid UTF-8 are decoded as Latin-1.
"""

from __future__ import annotations

import base64
from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from sourcegraph_client.core.domain.deltas.diff_stat import DiffStat
from sourcegraph_client.core.domain.shared import WireModel


class Hunk(WireModel):
    orig_start_line: int = 0
    orig_lines: int = 0
    orig_no_newline_at: int = 0
    new_start_line: int = 0
    new_lines: int = 0
    section: str = ""
    body: str = ""

    @model_validator(mode="before")
    @classmethod
    def decode_wire_body(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("Body"), str):
            data = dict(data)
            data["Body"] = _decode_body(data["Body"])
        return data

    def stat(self) -> DiffStat:
        """Counts lines; a deletion directly followed by an addition (or vice versa) is one change."""
        added = changed = deleted = 0
        last = ""
        for line in self.body.split("\n"):
            marker = line[:1]
            if marker == "-":
                if last == "+":
                    added -= 1
                    changed += 1
                    last = ""
                else:
                    deleted += 1
                    last = marker
            elif marker == "+":
                if last == "-":
                    deleted -= 1
                    changed += 1
                    last = ""
                else:
                    added += 1
                    last = marker
            else:
                last = ""
        return DiffStat(added=added, changed=changed, deleted=deleted)


class FileDiff(WireModel):
    orig_name: str = ""
    orig_time: datetime | None = None
    new_name: str = ""
    new_time: datetime | None = None
    extended: list[str] = Field(default_factory=list)
    hunks: list[Hunk] = Field(default_factory=list)

    def stat(self) -> DiffStat:
        return sum((hunk.stat() for hunk in self.hunks), DiffStat())


def _decode_body(encoded: str) -> str:
    # Invalid base64 raises binascii.Error, which pydantic reports as a ValidationError.
    raw = base64.b64decode(encoded, validate=True)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # Latin-1 maps every byte to one character, so line markers survive and
        # body.encode("latin-1") gives back the original bytes.
        return raw.decode("latin-1")
