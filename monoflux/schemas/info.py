"""Info Schemas - response contract for the /api/info document.

Invariants:
    - Serialized keys are camelCase (monoEndpoints, fluxEndpoints)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class InfoResponse(BaseModel):
    """Application metadata plus a path → description map per cardinality."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    application: str
    description: str
    version: str
    mono_endpoints: dict[str, str]
    flux_endpoints: dict[str, str]
