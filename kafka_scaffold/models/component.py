"""Models for generated producer and consumer components."""

import re
from typing import List
from pydantic import BaseModel, Field, field_validator


_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')
_NON_ALNUM = re.compile(r'[^0-9A-Za-z]+')


def _name_parts(value: str) -> List[str]:
    """Split a user supplied name into lowercase words."""
    spaced = _CAMEL_BOUNDARY.sub(' ', value)
    return [part.lower() for part in _NON_ALNUM.split(spaced) if part]


class ComponentSpec(BaseModel):
    """A producer or consumer to generate."""
    name: str = Field(..., description="Component name", min_length=1)
    topic: str = Field(..., description="Topic the component talks to", min_length=1)
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate that the name normalises to a Python identifier."""
        parts = _name_parts(v)
        if not parts:
            raise ValueError("Component name must contain letters or digits")
        if parts[0][0].isdigit():
            raise ValueError("Component name cannot start with a digit")
        return v.strip()
    
    @field_validator('topic')
    @classmethod
    def validate_topic(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Topic name cannot be empty")
        return v
    
    @property
    def module_name(self) -> str:
        """snake_case name used for the generated file."""
        return '_'.join(_name_parts(self.name))
    
    @property
    def class_name(self) -> str:
        """CamelCase name used inside the generated file."""
        return ''.join(part.capitalize() for part in _name_parts(self.name))
