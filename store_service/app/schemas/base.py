from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Range of the INTEGER columns backing ids and quantities
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

StoreInt = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class StoreSchema(BaseModel):
    """camelCase on the wire, snake_case in Python; reads ORM rows directly."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
