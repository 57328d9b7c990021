from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ReviewComment:
    path: str
    body: str
    position: int = 1
