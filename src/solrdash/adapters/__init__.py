"""Search backend adapter layer.

Built-in adapters:
  - solr: Apache Solr v8+ over the ``/select``, ``/update``, ``/admin/system``
    and ``/schema`` HTTP endpoints

Implement ``SearchBackend`` to put the dashboard in front of another engine.
"""
