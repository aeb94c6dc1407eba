"""
Shared pydantic building blocks.

JSON uses camelCase (rentCents, postedAt); Python code uses snake_case.
Requests may use either spelling.
"""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from utils.money import ensure_utc


def _iso_utc(value: datetime) -> str:
     return ensure_utc(value).isoformat().replace("+00:00", "Z")


# Serialized as ISO-8601 UTC with a "Z" suffix
UtcDateTime = Annotated[datetime, PlainSerializer(_iso_utc, return_type=str, when_used="json")]


class CamelModel(BaseModel):
     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )


class OkResponse(CamelModel):
     ok: bool = True
