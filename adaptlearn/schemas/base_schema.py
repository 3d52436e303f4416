"""Base Pydantic model shared by every schema stored in the document."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON payloads in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Serialise the model the way it is persisted in the storage document."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
