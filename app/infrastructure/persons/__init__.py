"""
Infrastructure adapters for the persons bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems, here the relational database.
"""
