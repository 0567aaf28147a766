"""Response models for configuration, connection probing and value browsing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from solrdash.models.query import FacetValue


class PublicConfig(BaseModel):
    """Connection details safe to show in the browser (no credentials)."""

    model_config = ConfigDict(populate_by_name=True)

    solr_url: str = Field(alias="solrUrl")
    solr_core: str = Field(alias="solrCore")
    show_unique_values: str | None = Field(default=None, alias="showUniqueValues")


class ConnectionProbe(BaseModel):
    """Result of ``/connection?action=test``."""

    connected: bool


class UniqueValues(BaseModel):
    """Distinct values of a field, most frequent first."""

    field: str
    values: list[FacetValue] = Field(default_factory=list)
    total: int = Field(default=0, description="Sum of counts over the listed values")
