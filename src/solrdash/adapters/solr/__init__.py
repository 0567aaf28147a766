"""Apache Solr backend."""

from solrdash.adapters.solr.adapter import SolrAdapter

__all__ = ["SolrAdapter"]
