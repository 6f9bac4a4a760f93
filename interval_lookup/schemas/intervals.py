from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel

# [gasoline, electric, hybrid]
ServiceFlags = Annotated[list[StrictBool], Field(min_length=3, max_length=3)]


# Upper bound of the INTEGER id column
MAX_RECORD_ID = 2**31 - 1


class SelectionRequest(BaseModel):
    id: Annotated[int, Field(ge=0, le=MAX_RECORD_ID)]

    @field_validator("id", mode="before")
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("id must be a number")
        return value


class LookupResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    engine_oil: ServiceFlags
    tire_rotation: ServiceFlags
    brake_fluid: ServiceFlags
    transmission_fluid: ServiceFlags
    differential_fluid: ServiceFlags
    coolant: ServiceFlags
    air_filter: ServiceFlags
    cabin_filter: ServiceFlags


class IntervalRecordIn(LookupResult):
    id: int
