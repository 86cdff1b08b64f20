"""
Email — the ordered, immutable result of a parse.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from reply_parser.models.fragment import Fragment, WorkingFragment


@dataclass(frozen=True)
class Email:
    """Fragments of one message body in top-to-bottom document order."""

    fragments: Tuple[Fragment, ...] = field(default=())

    @classmethod
    def from_working(cls, working: Sequence[WorkingFragment]) -> "Email":
        """
        Assemble an Email from builder output.

        The builder emits fragments bottom-up, so both the fragment order and
        the line order inside each fragment are reversed here.
        """
        return cls(fragments=tuple(w.finish() for w in reversed(working)))

    @property
    def visible_fragments(self) -> List[Fragment]:
        return [f for f in self.fragments if not f.is_hidden]

    @property
    def visible_text(self) -> str:
        """The new reply text: every non-hidden fragment, right-trimmed."""
        return "\n".join(f.content for f in self.visible_fragments).rstrip()

    @property
    def text(self) -> str:
        """All fragments joined back together, hidden ones included."""
        return "\n".join(f.content for f in self.fragments)

    def to_dict(self) -> dict:
        return {
            "fragments": [f.to_dict() for f in self.fragments],
            "visible_text": self.visible_text,
        }

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __getitem__(self, index: int) -> Fragment:
        return self.fragments[index]
