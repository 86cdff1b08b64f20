"""
Fragment Builder — the bottom-up, line-oriented state machine.

Lines are visited from the end of the message to the start. Signatures and
quote headers anchor the *top* of the block they open, so walking upwards
means a block can be closed as soon as the line above its topmost line is
seen, without looking ahead over the rest of the message.

Per visited line L (W = working fragment, last = W's topmost line so far):
    1. quoted = L is '>'-quoted
    2. close W as signature  if last is a signature marker
       close W as quoted     if L is empty and last is a quote header
    3. L belongs to W        if W.is_quoted == quoted, or W is quoted and
                             L is empty or a quote header
    4. otherwise close W and open a new one with is_quoted = quoted
    5. add L to W
"""
import logging
from typing import List, Optional

from reply_parser.models.fragment import WorkingFragment
from reply_parser.parsing.classifier import LineClassifier

logger = logging.getLogger(__name__)


class FragmentBuilder:
    """
    Single-use builder: one instance per parse call.

    Finished fragments are kept in builder order (bottom-up); Email.from_working
    turns them back into document order.
    """

    def __init__(self, classifier: LineClassifier):
        self.classifier = classifier
        self.fragments: List[WorkingFragment] = []
        self.current: Optional[WorkingFragment] = None

    def build(self, text: str) -> List[WorkingFragment]:
        for raw in reversed(text.split("\n")):
            self.feed(self.classifier.prepare_line(raw))
        self.finish()
        return self.fragments

    def feed(self, line: str) -> None:
        """Visit one prepared line, moving upwards through the message."""
        quoted = self.classifier.is_quote_marker(line)

        if self.current is not None:
            last = self.current.last_line
            if self.classifier.is_signature_marker(last):
                self.current.is_signature = True
                self._close()
            elif line == "" and self.classifier.is_quote_header(last):
                self.current.is_quoted = True
                self._close()

        if self.current is None or not self._belongs(line, quoted):
            self._close()
            self.current = WorkingFragment(is_quoted=quoted)

        self.current.lines.append(line)

    def finish(self) -> None:
        """Close the topmost fragment once the scan reaches the first line."""
        if self.current is None:
            return
        if self.classifier.is_signature_marker(self.current.last_line):
            self.current.is_signature = True
        self._close()
        logger.debug("Built %d fragments", len(self.fragments))

    def _belongs(self, line: str, quoted: bool) -> bool:
        if self.current.is_quoted == quoted:
            return True
        return self.current.is_quoted and (
            line == "" or self.classifier.is_quote_header(line)
        )

    def _close(self) -> None:
        if self.current is not None:
            self.fragments.append(self.current)
            self.current = None


def build_fragments(text: str, classifier: LineClassifier) -> List[WorkingFragment]:
    """Split normalized *text* into working fragments, bottom-up order."""
    return FragmentBuilder(classifier).build(text)
