"""SolrDash — Administrative REST backend for inspecting and pruning a Solr core."""

__version__ = "0.1.0"
