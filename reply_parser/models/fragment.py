"""
Fragment and WorkingFragment — one contiguous block of an email body.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Fragment:
    """A finished block of lines sharing one classification."""

    content: str
    is_quoted: bool = False
    is_signature: bool = False
    is_hidden: bool = False

    @property
    def is_empty(self) -> bool:
        return self.content.replace("\n", "") == ""

    @property
    def kind(self) -> str:
        """'quoted' | 'signature' | 'empty' | 'visible'"""
        if self.is_quoted:
            return "quoted"
        if self.is_signature:
            return "signature"
        if self.is_empty:
            return "empty"
        return "visible"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "content": self.content,
            "is_quoted": self.is_quoted,
            "is_signature": self.is_signature,
            "is_hidden": self.is_hidden,
        }

    def __str__(self) -> str:
        return self.content


@dataclass
class WorkingFragment:
    """
    Builder-internal fragment filled during the bottom-up scan.

    Lines are stored in reverse document order (last line first); each line
    itself keeps its natural character order.
    """

    is_quoted: bool
    is_signature: bool = False
    lines: List[str] = field(default_factory=list)

    @property
    def last_line(self) -> str:
        """Most recently added line, i.e. the topmost line seen so far."""
        return self.lines[-1]

    @property
    def is_empty(self) -> bool:
        return "".join(self.lines) == ""

    @property
    def is_hidden(self) -> bool:
        return self.is_quoted or self.is_signature or self.is_empty

    def finish(self) -> Fragment:
        """
        Freeze into a Fragment with lines back in document order.

        At most one blank line is dropped at each edge: the join artifact
        at the top and the separator line at the bottom.
        """
        content = "\n".join(reversed(self.lines))
        if content.startswith("\n"):
            content = content[1:]
        if content.endswith("\n"):
            content = content[:-1]
        return Fragment(
            content=content,
            is_quoted=self.is_quoted,
            is_signature=self.is_signature,
            is_hidden=self.is_hidden,
        )
