"""
Persons bounded context: domain layer.

This module contains all domain logic for the persons context:
- Person records and the color classification
- CSV import parsing and validation
- Persistence port
"""
