"""
Shared module package.

Cross-cutting concerns used by the HTTP layer: the domain-to-HTTP
error mapping, security headers, rate limiting and logging setup.
"""
