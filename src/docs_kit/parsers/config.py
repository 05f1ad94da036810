# src/docs_kit/parsers/config.py

from dataclasses import dataclass
from typing import Literal

ReconcileStrategy = Literal["content", "provenance"]

RECONCILE_STRATEGIES: tuple[str, ...] = ("content", "provenance")


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the annotated source parser.

    ``reconcile`` picks how clean-code line ranges are derived:
    ``"content"`` matches each section's first code line against the
    stripped file, ``"provenance"`` uses the position recorded while
    scanning.
    """

    reconcile: ReconcileStrategy = "content"

    def __post_init__(self) -> None:
        if self.reconcile not in RECONCILE_STRATEGIES:
            raise ValueError(f"Unknown reconcile strategy: {self.reconcile}")
