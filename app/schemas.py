from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from pydantic.alias_generators import to_camel
from datetime import datetime

class BookBase(BaseModel):
    name: str = ''
    # wire key keeps the stored column's spelling, 'author' is accepted on input
    author: str = Field(
        default='',
        validation_alias=AliasChoices('auther', 'author'),
        serialization_alias='auther'
    )
    is_archived: bool = False

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra='ignore'
    )

class BookCreate(BookBase):
    pass

class BookResponse(BookBase):
    id: int
    code: str
    created_at: datetime
    updated_at: datetime
