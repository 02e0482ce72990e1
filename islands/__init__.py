"""Game of Islands: the game aggregate and the values it is built from.

Kept free of FastAPI concerns so it can be reused by API routes, workers, and tests.
"""
