"""
Indentation-to-block-delimiter inference.

Sources such as Python delimit blocks by indentation depth, while most targets
need explicit closing tokens. After the header rules of a chain have turned
``if x:`` into ``if (x) {`` (or ``if x`` for keyword-closed targets), this
module inserts the matching closers.

Two modes are available:

- LOOKAHEAD compares each line with the next one only and inserts at most one
  closer per dedent. It under-closes when several levels end at once. For
  keyword closers the dedenting line must itself be a block header.
- STACK tracks open blocks and inserts one closer per level that ends, so
  keyword closers also follow ordinary statements that end a block.
"""

import logging
import re
from dataclasses import dataclass

from rulemorph.config.models import BlockMatching

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockCloser:
    """Closing-token policy for one target language."""

    token: str
    opening_token: str | None = None
    # Keyword variant only: lines that open a block closed by `token`
    header_pattern: re.Pattern | None = None
    # Lines that continue the current block instead of following it
    continuation_pattern: re.Pattern | None = None

    @property
    def is_keyword_variant(self) -> bool:
        return self.header_pattern is not None

    def ends_with_block_token(self, line: str) -> bool:
        stripped = line.rstrip()
        if self.opening_token and stripped.endswith(self.opening_token):
            return True
        if self.token.isalpha():
            return re.search(rf"\b{re.escape(self.token)}$", stripped) is not None
        return stripped.endswith(self.token)

    def is_continuation(self, line: str) -> bool:
        if self.continuation_pattern is not None:
            return self.continuation_pattern.match(line) is not None
        return line.lstrip().startswith(self.token)

    def opens_block(self, line: str) -> bool:
        if self.header_pattern is not None:
            return self.header_pattern.search(line) is not None
        return bool(self.opening_token) and line.rstrip().endswith(self.opening_token)


BRACE_CLOSER = BlockCloser(token="}", opening_token="{")

END_KEYWORD_CLOSER = BlockCloser(
    token="end",
    header_pattern=re.compile(
        r"^\s*(?:if|elsif|else|unless|while|until|def|class|module|begin|rescue|ensure)\b"
        r"|\bdo(?:\s*\|[^|]*\|)?\s*$"
    ),
    continuation_pattern=re.compile(r"^\s*(?:else|elsif|rescue|ensure|when)\b"),
)


def leading_width(line: str) -> int:
    """Count leading whitespace characters."""
    return len(line) - len(line.lstrip())


def _infer_lookahead(lines: list[str], closer: BlockCloser) -> list[str]:
    result: list[str] = []
    for i, line in enumerate(lines):
        result.append(line)
        has_next = i + 1 < len(lines)
        current_width = leading_width(line)
        next_width = leading_width(lines[i + 1]) if has_next else 0

        if current_width <= next_width or not line.strip():
            continue
        if closer.ends_with_block_token(line):
            continue
        if has_next and closer.is_continuation(lines[i + 1]):
            continue
        # Keyword closers only follow a line that is itself a block header
        if closer.is_keyword_variant and not closer.opens_block(line):
            continue

        result.append(" " * next_width + closer.token)
    return result


def _next_code_line(lines: list[str], index: int) -> str | None:
    for j in range(index + 1, len(lines)):
        if lines[j].strip():
            return lines[j]
    return None


def _infer_stack(lines: list[str], closer: BlockCloser) -> list[str]:
    result: list[str] = []
    open_blocks: list[int] = []
    for i, line in enumerate(lines):
        result.append(line)
        if not line.strip():
            continue
        if closer.opens_block(line):
            open_blocks.append(leading_width(line))

        following = _next_code_line(lines, i)
        next_width = leading_width(following) if following is not None else 0
        while open_blocks and open_blocks[-1] >= next_width:
            width = open_blocks.pop()
            # "} else {" / "else" closes this level itself and reopens it
            if width == next_width and following is not None and closer.is_continuation(following):
                continue
            result.append(" " * width + closer.token)
    return result


def infer_block_closers(
    code: str,
    closer: BlockCloser,
    mode: BlockMatching = BlockMatching.LOOKAHEAD,
) -> str:
    """
    Insert closing block tokens based on indentation changes.

    Args:
        code: Text whose block headers were already rewritten
        closer: Closing-token policy of the target language
        mode: LOOKAHEAD (one closer per dedent) or STACK (one per level)

    Returns:
        Text with closing tokens inserted on their own lines
    """
    lines = code.split("\n")
    if mode == BlockMatching.STACK:
        closed = _infer_stack(lines, closer)
    else:
        closed = _infer_lookahead(lines, closer)
    logger.debug(f"Inserted {len(closed) - len(lines)} '{closer.token}' closer(s) ({mode.value})")
    return "\n".join(closed)
