"""
Interfaces layer package.

HTTP surface of the person service: FastAPI routers, camelCase
Pydantic schemas and dependency wiring. Routes call use cases and
return responses.
"""
