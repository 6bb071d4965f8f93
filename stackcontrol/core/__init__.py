"""Core piece-supply primitives (bounded containers, exchanges, results, rendering).

Kept free of FastAPI concerns so it can be reused by the API routes, the menu CLI, and tests.
"""
