"""Shared base model for all API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase aliases, populated by either name.

    ``profile_pic_url`` travels as ``profilePicUrl``, ``user_id2`` as
    ``userId2`` and so on.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
