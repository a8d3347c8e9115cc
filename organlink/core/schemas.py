"""
Base schema shared by every request/response model.

Python attributes stay snake_case; JSON uses camelCase on the way in and out.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Pydantic base model with camelCase aliases and ORM loading enabled"""

    class Config:
        """Configuration for Pydantic model"""
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
