from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutDecision:
    """How a listing is laid out: column count, row count and column widths."""

    columns: int
    rows: int
    max_left: int = 0
    max_right: int = 0

    @classmethod
    def single_column(cls, rows: int) -> "LayoutDecision":
        return cls(columns=1, rows=rows)

    @property
    def is_two_column(self) -> bool:
        return self.columns == 2
