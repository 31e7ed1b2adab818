from enum import Enum


class DeltaKind(str, Enum):
    ADDED = "ADDED"
    CHANGED = "CHANGED"
    DELETED = "DELETED"

    @property
    def sort_rank(self) -> int:
        return _SORT_RANK[self]


# Listings show additions, then changes, then deletions.
_SORT_RANK = {
    DeltaKind.ADDED: 0,
    DeltaKind.CHANGED: 1,
    DeltaKind.DELETED: 2,
}
