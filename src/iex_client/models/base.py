from typing import Any
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class IEXModel(BaseModel):
    """
    Base for all response models.

    Fields are declared in snake_case and read from the API's
    camelCase keys. Unknown fields are ignored and JSON `null` values
    are dropped before validation, so a null behaves like an absent
    field and the model default (usually `None`) applies.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
