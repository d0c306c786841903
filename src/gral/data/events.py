"""Change notification between data sources and their listeners."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from gral.data.source import DataSource


@dataclass(frozen=True)
class DataChangeEvent:
    """Describes one changed cell. `old` is None for additions, `new` for removals."""
    source: DataSource
    col: int
    row: int
    old: Any
    new: Any


class DataListener(Protocol):
    """Objects that want to be informed about changes of a data source."""

    def data_added(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None: ...

    def data_updated(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None: ...

    def data_removed(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None: ...
