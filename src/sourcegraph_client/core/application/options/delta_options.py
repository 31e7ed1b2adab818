from __future__ import annotations

from sourcegraph_client.core.application.options.list_options import ListOptions, QueryOptions
from sourcegraph_client.core.domain.entities import Def


class DeltaFilter(QueryOptions):
    """Narrows delta listings to a single source unit."""

    unit: str = ""
    unit_type: str = ""

    def unit_key(self) -> tuple[str, str] | None:
        # Only a fully qualified unit filters anything.
        if self.unit_type and self.unit:
            return (self.unit_type, self.unit)
        return None

    def matches_def(self, definition: Def) -> bool:
        key = self.unit_key()
        return key is None or (definition.unit_type, definition.unit) == key


class DeltaGetOptions(QueryOptions):
    pass


class DeltaListUnitsOptions(QueryOptions):
    pass


class DeltaListDefsOptions(DeltaFilter, ListOptions):
    pass


class DeltaListFilesOptions(DeltaFilter):
    # Whether code files come back syntax-highlighted and reference-linked.
    formatted: bool = False
    # Only files whose name matches this.
    filter: str = ""


class DeltaListAffectedAuthorsOptions(DeltaFilter, ListOptions):
    pass


class DeltaListAffectedClientsOptions(DeltaFilter, ListOptions):
    pass
