"""
Application layer package.

One use case class per person operation (create, get, list, lookup by
color, CSV import), each exposing ``execute``. Depends on domain ports,
never on infrastructure.
"""
