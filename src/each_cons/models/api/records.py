from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from each_cons.models.api.util import ApiBaseModel
from each_cons.runs import Run

"""
Records written by the command line tools in JSON mode, one per line.

Field names are serialized in lower camel case (e.g., `startIndex`).
"""


class WindowRecord(ApiBaseModel):
    index: int = Field(ge=0)
    items: list[str | None]

    @classmethod
    def from_window(cls, index: int, window: Sequence[str | None]) -> WindowRecord:
        return cls(index=index, items=list(window))


class RunRecord(ApiBaseModel):
    value: str
    count: int = Field(ge=1)
    start_index: int = Field(ge=0)

    @classmethod
    def from_run(cls, run: Run[str]) -> RunRecord:
        return cls(value=run.value, count=len(run), start_index=run.start)
