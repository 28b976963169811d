"""Two-stack puzzle engine: input validation, ranking, operations and chunked pushes from A to B."""

__version__ = "0.1.0"
__all__ = ["cli", "indexing", "operations", "parsing", "sorting", "stack"]