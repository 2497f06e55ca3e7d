"""
Posts & Comments API - aggregation and filtering over a public content API.

This package provides a FastAPI service that ranks posts by comment count and
filters comments with AND/OR field predicates.
"""

__version__ = "0.1.0"
