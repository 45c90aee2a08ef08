"""
Base schemas with common functionality.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common functionality for all schemas.

    Fields are snake_case in Python and camelCase on the wire (and in the
    products document), matching what the UI has always sent and read.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready dict using wire (camelCase) names"""
        return self.model_dump(mode="json", by_alias=True)
