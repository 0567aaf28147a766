"""Helpers for Solr's ``/select`` wire format.

- ``build_select_params`` turns ``QueryParameters`` into an ordered list of
  ``(key, value)`` pairs, repeating keys for multi-valued parameters.
- ``term_query`` builds an exact-match ``field:"value"`` clause.
- ``decode_facet_pairs`` converts Solr's flat ``[v0, c0, v1, c1, ...]``
  facet arrays into ``(value, count)`` pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from solrdash.models.query import QueryParameters

logger = logging.getLogger(__name__)


def build_select_params(params: QueryParameters) -> list[tuple[str, str]]:
    """Serialize ``params`` for a ``/select`` GET request.

    Only fields that are set are emitted.  ``fq``, ``fl`` and
    ``facet.field`` become repeated keys in input order.  ``wt`` is always
    present.
    """
    pairs: list[tuple[str, str]] = [("q", params.q)]

    for fq in params.fq or []:
        pairs.append(("fq", fq))
    if params.sort is not None:
        pairs.append(("sort", params.sort))
    if params.start is not None:
        pairs.append(("start", str(params.start)))
    if params.rows is not None:
        pairs.append(("rows", str(params.rows)))
    for fl in params.fl or []:
        pairs.append(("fl", fl))

    if params.facet is not None:
        pairs.append(("facet", "true" if params.facet else "false"))
    for field in params.facet_field or []:
        pairs.append(("facet.field", field))
    if params.facet_limit is not None:
        pairs.append(("facet.limit", str(params.facet_limit)))
    if params.facet_mincount is not None:
        pairs.append(("facet.mincount", str(params.facet_mincount)))

    pairs.append(("wt", params.wt))
    return pairs


def quote_term(value: str) -> str:
    """Quote ``value`` as a Solr phrase, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def term_query(field: str, value: str) -> str:
    """Exact-match clause on ``field``, e.g. ``hash:"abc"``.

    Operators, wildcards and parentheses inside ``value`` stay literal.
    """
    return f"{field}:{quote_term(value)}"


def decode_facet_pairs(flat: Sequence[Any]) -> list[tuple[str, int]]:
    """Decode a flat facet array into ``(value, count)`` pairs.

    >>> decode_facet_pairs(["siteA", 5, "siteB", 3])
    [('siteA', 5), ('siteB', 3)]

    An odd trailing element has no count and is dropped.
    """
    if len(flat) % 2:
        logger.debug("Dropping unmatched trailing facet element %r", flat[-1])

    pairs: list[tuple[str, int]] = []
    for i in range(0, len(flat) - 1, 2):
        value, count = flat[i], flat[i + 1]
        if value is None:
            # facet.missing bucket
            continue
        try:
            pairs.append((str(value), int(count)))
        except (TypeError, ValueError):
            logger.debug("Skipping malformed facet entry %r=%r", value, count)
    return pairs
