# src/serdeguard/engine/statement.py
"""Statements of a generated test case."""

from dataclasses import dataclass, field


@dataclass
class Statement:
    """A single statement with the comments attached to it.

    Fields:
        position: Index of the statement in its test case
        code: Source text of the statement
        comments: Comments emitted alongside the statement
    """

    position: int
    code: str
    comments: list[str] = field(default_factory=list)

    def add_comment(self, comment: str) -> None:
        self.comments.append(comment)

    def __str__(self) -> str:
        return self.code
