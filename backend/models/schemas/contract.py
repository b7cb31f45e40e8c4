"""Shared base for the arbiter contracts.

Python code uses snake_case attributes; the wire shape consumed by the web
layer is camelCase, produced with ``model_dump(by_alias=True)``.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
