from dataclasses import dataclass


@dataclass(frozen=True)
class CostBreakdown:
    input_usd: float
    output_usd: float

    @property
    def total_usd(self) -> float:
        return self.input_usd + self.output_usd


def format_usd(amount: float | None) -> str:
    return f"${amount:.6f}" if amount is not None else "unknown"
