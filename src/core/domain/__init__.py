"""Domain models and errors.

Pure data structures (Pydantic v2). The domain knows nothing about HTTP,
the CLI or the console.
"""
