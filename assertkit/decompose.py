"""Splitting of a C++ comparison expression into its left and right operands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from assertkit.lexicon import (
    ASSIGNMENT_PRECEDENCE,
    BRACES,
    OPERATORS,
    Token,
    TokenType,
    normalize_brace,
    normalize_op,
    precedence_of,
)

__all__ = ["MaxDepthExceeded", "find_split_candidates", "decompose"]

MAX_DEPTH = 10
_UNKNOWN_SPLIT = ("left", "right")


class MaxDepthExceeded(RuntimeError):
    """Raised when exploring possible template readings nests too deeply."""


class _SplitSearch:
    """Explores every template/comparison reading of '<' and records splits on the target."""

    def __init__(self, tokens: Sequence[Token], target_op: str) -> None:
        self.tokens = tokens
        self.target_op = target_op
        self.candidates: set[int] = set()

    def _last_significant(self, index: int) -> Token:
        for token in reversed(self.tokens[:index]):
            if token.type is not TokenType.WHITESPACE:
                return token
        return Token(TokenType.WHITESPACE, "")

    def _real_op(self, index: int) -> str:
        tokens = self.tokens
        if tokens[index].text == ">" and index + 1 < len(tokens) and tokens[index + 1].text == ">":
            return ">>"
        return tokens[index].text

    def _scan_forward(self, index: int, opening: str, closing: str) -> tuple[int, bool]:
        """Move to the brace closing the one at index; report whether nothing was inside."""
        opening = normalize_brace(opening)
        closing = normalize_brace(closing)
        empty = True
        count = 0
        index += 1
        while index < len(self.tokens):
            token = self.tokens[index]
            brace = normalize_brace(token.text)
            if brace == opening:
                count += 1
            elif brace == closing:
                if count == 0:
                    break
                count -= 1
            elif token.type is not TokenType.WHITESPACE:
                empty = False
            index += 1
        return index, empty

    def parse(
        self,
        index: int,
        lowest: int,
        template_depth: int,
        middle: int,
        depth: int,
    ) -> None:
        if depth > MAX_DEPTH:
            raise MaxDepthExceeded("Max depth exceeded")
        tokens = self.tokens
        expecting_term = True
        while index < len(tokens):
            token = tokens[index]
            if token.type is TokenType.PUNCTUATION:
                if token.text in OPERATORS:
                    if not expecting_term:
                        if token.text == "<":
                            previous = self._last_significant(index)
                            if previous.type is TokenType.IDENTIFIER:
                                # Read it as a template opening; then also as a comparison.
                                self.parse(index + 1, lowest, template_depth + 1, middle, depth + 1)
                            elif normalize_brace(previous.text) == "]":
                                # Template parameter list of a generic lambda.
                                index, _ = self._scan_forward(index, "<", ">")
                                index += 1
                                continue
                        if template_depth > 0 and token.text == ">":
                            template_depth -= 1
                            index += 1
                            continue
                        if template_depth == 0:
                            op = normalize_op(self._real_op(index))
                            level = precedence_of(op)
                            if level is not None and (
                                level < lowest
                                or (level == lowest and level != ASSIGNMENT_PRECEDENCE)
                            ):
                                middle = index
                                lowest = level
                            if op == ">>":
                                index += 1
                        expecting_term = True
                elif token.text in BRACES:
                    opening = token.text
                    index, empty = self._scan_forward(index, opening, BRACES[opening])
                    if expecting_term and empty and normalize_brace(opening) != "[":
                        return
                    expecting_term = False
            elif token.type is not TokenType.WHITESPACE:
                expecting_term = False
            index += 1
        if (
            middle != -1
            and normalize_op(self._real_op(middle)) == self.target_op
            and template_depth == 0
            and not expecting_term
        ):
            self.candidates.add(middle)


def find_split_candidates(tokens: Iterable[Token], target_op: str) -> set[int]:
    """Token indices at which some plausible parse splits the expression on target_op.

    Tokens are expected with '>>' already broken into two '>' tokens.
    Raises MaxDepthExceeded when too many nested template readings are possible.
    """
    search = _SplitSearch(list(tokens), target_op)
    search.parse(0, 0, 0, -1, 0)
    return search.candidates


def decompose(tokens: Iterable[Token], target_op: str) -> tuple[str, str]:
    """Return the left and right operand text, or ('left', 'right') if ambiguous."""
    tokens = list(tokens)
    try:
        candidates = find_split_candidates(tokens, target_op)
    except MaxDepthExceeded:
        return _UNKNOWN_SPLIT
    if len(candidates) != 1:
        return _UNKNOWN_SPLIT
    (split,) = candidates
    right_start = split + (2 if target_op == ">>" else 1)
    left = "".join(token.text for token in tokens[:split]).strip()
    right = "".join(token.text for token in tokens[right_start:]).strip()
    return left, right