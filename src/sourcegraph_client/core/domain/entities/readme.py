from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class Readme(WireModel):
    path: str = ""
    data: str = ""
    html: str = Field(default="", alias="HTML")
