"""Result-style parse carrier."""

from gmml.pipeline.result import GmmlParseResult

__all__ = ["GmmlParseResult"]
