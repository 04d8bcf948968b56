"""Post Schemas — create/update bodies and the post response projection.

Invariants:
    - PostCreate.title required and non-empty; content optional, defaults to ""
    - PostUpdate needs at least one of title/content; neither may be null;
      title non-empty when present; content may be ""
    - Unknown keys rejected — author_id can never arrive through a body
    - PostResponse.author is {id, email} only

Design Decisions:
    - model_fields_set over None checks: distinguishes "absent" from "null"
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from blog_api.schemas.auth import AccountSummary


class PostCreate(BaseModel):
    """Post creation body."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    content: str = ""


class PostUpdate(BaseModel):
    """Partial post update body."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1)
    content: str | None = None

    @model_validator(mode="after")
    def validate_provided_fields(self):
        if not self.model_fields_set:
            raise ValueError("At least one of title or content must be provided")
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must be a string")
        return self

    def changes(self) -> dict[str, str]:
        """Only the fields the client sent."""
        return self.model_dump(include=self.model_fields_set)


class PostResponse(BaseModel):
    """Post with projected author."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    author: AccountSummary
