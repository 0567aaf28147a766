"""Query request and result models.

``QueryParameters`` mirrors the subset of Solr's ``/select`` parameters the
dashboard exposes.  Dotted Solr names (``facet.field`` ...) are the wire
aliases; Python code uses the underscore attribute names.

``QueryResult`` keeps Solr's response shape so it can be returned to the
browser verbatim.  Sections the dashboard does not model (highlighting,
stats, debug) are kept as extra fields.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

Document = dict[str, JsonValue]
"""A Solr document: field name to a JSON value (str, number, bool, null, list, mapping)."""


class QueryParameters(BaseModel):
    """Structured parameters for a ``/select`` request.

    Unset optional fields are ``None`` and never reach the outbound request.
    Multi-valued fields accept either a list or a single string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    q: str = Field(default="*:*", description="Main query")
    fq: list[str] | None = Field(default=None, description="Filter queries, applied in order")
    sort: str | None = Field(default=None, description="Sort expression, e.g. 'timestamp desc'")
    start: int | None = Field(default=None, ge=0, description="Offset of the first returned document")
    rows: int | None = Field(default=None, ge=0, description="Maximum number of documents to return")
    fl: list[str] | None = Field(default=None, description="Field list")
    facet: bool | None = Field(default=None, description="Enable faceting")
    facet_field: list[str] | None = Field(default=None, alias="facet.field", description="Fields to facet on")
    facet_limit: int | None = Field(default=None, alias="facet.limit", description="Max values per facet field")
    facet_mincount: int | None = Field(
        default=None, alias="facet.mincount", description="Minimum count for a facet value to be returned"
    )
    wt: Literal["json"] = Field(default="json", description="Response writer; only JSON is decoded")

    @field_validator("fq", "fl", "facet_field", mode="before")
    @classmethod
    def _single_to_list(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v


class ResponseHeader(BaseModel):
    """Solr ``responseHeader`` block."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: int = Field(default=0, description="Solr status code (0 = OK)")
    qtime: int = Field(default=0, alias="QTime", description="Server-side elapsed time in ms")
    params: dict[str, JsonValue] = Field(default_factory=dict, description="Echoed request parameters")


class ResultBlock(BaseModel):
    """Solr ``response`` block."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    num_found: int = Field(default=0, ge=0, alias="numFound", description="Total matching documents")
    start: int = Field(default=0, ge=0, description="Offset of the first returned document")
    docs: list[Document] = Field(default_factory=list, description="Returned documents, in rank order")


class FacetCounts(BaseModel):
    """Solr ``facet_counts`` block.

    ``facet_fields`` keeps Solr's flat ``[value, count, value, count, ...]``
    layout; use ``QueryResult.facet_pairs`` for decoded pairs.
    """

    model_config = ConfigDict(extra="allow")

    facet_fields: dict[str, list[JsonValue]] = Field(default_factory=dict)
    facet_queries: dict[str, int] = Field(default_factory=dict)
    facet_ranges: dict[str, JsonValue] = Field(default_factory=dict)


class QueryResult(BaseModel):
    """Parsed ``/select`` response."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    response_header: ResponseHeader = Field(default_factory=ResponseHeader, alias="responseHeader")
    response: ResultBlock = Field(default_factory=ResultBlock)
    facet_counts: FacetCounts | None = Field(default=None)

    def facet_pairs(self, field: str) -> list[tuple[str, int]]:
        """Decoded ``(value, count)`` pairs for ``field``, in Solr's order.

        Returns an empty list when faceting was off or the field was not
        faceted.
        """
        from solrdash.adapters.solr.query import decode_facet_pairs

        if self.facet_counts is None:
            return []
        return decode_facet_pairs(self.facet_counts.facet_fields.get(field, []))


class FacetValue(BaseModel):
    """A distinct field value and the number of documents carrying it."""

    value: str
    count: int = Field(ge=0)
