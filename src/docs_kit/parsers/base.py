# src/docs_kit/parsers/base.py

from abc import ABC, abstractmethod

from .models import ParseResult


class SourceParser(ABC):
    @abstractmethod
    def parse(self, source: str) -> ParseResult:
        """
        Split an annotated source file into documentation/code sections.

        Requirements:
        - Deterministic output for same input
        - Never raises on malformed annotations; degrades to heuristics
        - Line numbers are 1-based and inclusive
        """
        raise NotImplementedError
