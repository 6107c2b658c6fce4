from dataclasses import dataclass
from typing import Any, Optional


def _count(value: Any) -> int:
    """Coerce a provider-reported token count; missing or invalid becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 0
    return count if count > 0 else 0


@dataclass(frozen=True)
class Usage:
    """
    Token accounting for one provider call.

    total_tokens is taken as reported; providers may count hidden reasoning or
    cached tokens in it, so it can exceed prompt + completion.
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_counts(
        cls,
        prompt_tokens: Any = None,
        completion_tokens: Any = None,
        total_tokens: Optional[Any] = None,
    ) -> "Usage":
        return cls(
            prompt_tokens=_count(prompt_tokens),
            completion_tokens=_count(completion_tokens),
            total_tokens=_count(total_tokens),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


ZERO_USAGE = Usage()
