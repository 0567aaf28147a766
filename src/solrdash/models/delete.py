"""Delete request and result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator


class DeleteRequest(BaseModel):
    """Delete one document by ``id`` or every document sharing a ``hash`` value.

    Exactly one of the two must be given, as a non-blank string.
    """

    model_config = ConfigDict(extra="forbid")

    id: StrictStr | None = Field(default=None, description="Identifier of the document to delete")
    hash: StrictStr | None = Field(default=None, description="Discriminator value whose documents are deleted")

    @model_validator(mode="after")
    def _exactly_one_target(self) -> DeleteRequest:
        given = [name for name in ("id", "hash") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError("Exactly one of 'id' or 'hash' is required")
        if not getattr(self, given[0]).strip():
            raise ValueError(f"'{given[0]}' must not be blank")
        return self


class DeleteResult(BaseModel):
    """Outcome of a successful delete."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    deleted_id: str | None = Field(default=None, alias="deletedId")
    deleted_count: int | None = Field(default=None, alias="deletedCount")


class DeleteAck(BaseModel):
    """Solr's acknowledgement of an update command."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: int = 0
    qtime: int = Field(default=0, alias="QTime")
