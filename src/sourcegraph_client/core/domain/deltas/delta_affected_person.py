from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.entities import Def, Person


class DeltaAffectedPerson(Person):
    """
    A person affected by a delta, with the defs that explain why.

    From an authors listing the defs are ones the person committed; from a
    clients listing they are defs the person uses.
    """

    defs: list[Def] = Field(default_factory=list)
