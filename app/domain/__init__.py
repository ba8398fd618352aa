"""
Domain layer package.

Person entities, the color classification, the CSV line parser,
repository ports and domain errors. No framework imports and no IO.
"""
