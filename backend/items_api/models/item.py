from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Request body for creating an item. Unknown fields are stored as sent."""

    model_config = ConfigDict(
        extra='allow',
        json_schema_extra={'example': {'name': 'Widget'}},
    )

    id: Any = Field(None, description='Ignored; the server always assigns a new id')
    name: Any = Field(None, description='The name of the item', json_schema_extra={'type': 'string'})


class Item(BaseModel):
    """A stored item as returned by the API"""

    model_config = ConfigDict(
        extra='allow',
        json_schema_extra={'example': {'id': '3f1c2b9e-8d4a-4f6b-9a51-0c7e2d1b5a44', 'name': 'Widget'}},
    )

    id: str | int = Field(..., description='The ID of the item')
    name: Any = Field(None, description='The name of the item', json_schema_extra={'type': 'string'})


class Message(BaseModel):
    """Plain message response"""

    message: str = Field(..., description='Human readable message')
