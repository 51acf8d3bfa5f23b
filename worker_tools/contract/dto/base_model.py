""" Base Model (Pydantic) Over-Ride """

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict


class BaseModel(PydanticBaseModel):
    """BaseModel [Pydantic] Over-Ride"""

    # https://docs.pydantic.dev/latest/api/config/
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
    )
