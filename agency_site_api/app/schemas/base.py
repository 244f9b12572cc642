"""
Shared pydantic base class.

Fields are declared in snake_case for the service layer and exposed in
camelCase on the wire, which is the shape the site front-end consumes.
Either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
