"""Infer a class diagram from an arbitrary JSON document."""

from jsonzoom.pipeline import transform, transform_with_edges

__all__ = ["transform", "transform_with_edges"]
