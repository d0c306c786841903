"""
Stateful Tokenizer
==================
A tokenizing parser that analyzes a string using different sets of regular
expression based rules and produces a list of tokens.

The class is meant to be sub-classed to implement new grammars. Rule sets are
registered per state with `put_rules`. Each rule produces one token with a
type and can switch to another state, or return to the previous state with the
special state name ``"#pop"``.

The produced tokens can be post-processed: adjacent tokens of a *joined* type
are merged into one, and tokens of an *ignored* type are dropped.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

INITIAL_STATE = ""
POP_STATE = "#pop"


@dataclass
class Token:
    """A section of the input text. `content` may be shorter than end - start."""
    start: int
    end: int
    type: Any
    content: str

    def append(self, other: Token) -> None:
        self.content += other.content
        self.end = other.end


class Rule:
    """
    A regular expression based rule of a grammar.

    If the pattern contains a capture group, group 1 becomes the token content,
    otherwise the whole match does.
    """

    def __init__(self, pattern: str, token_type: Any, next_state: Optional[str] = None) -> None:
        self.pattern = re.compile(pattern)
        self.token_type = token_type
        self.next_state = next_state

    def get_token(self, data: str, pos: int) -> Optional[Token]:
        m = self.pattern.match(data, pos)
        if m is None:
            return None
        content = m.group(1) if self.pattern.groups > 0 else m.group()
        return Token(m.start(), m.end(), self.token_type, content or "")


class StatefulTokenizer:
    def __init__(self) -> None:
        self._joined_types: set[Any] = set()
        self._ignored_types: set[Any] = set()
        self._grammar: dict[str, list[Rule]] = {}

    def add_joined_type(self, token_type: Any) -> None:
        self._joined_types.add(token_type)

    def add_ignored_type(self, token_type: Any) -> None:
        self._ignored_types.add(token_type)

    def put_rules(self, *rules: Rule, state: str = INITIAL_STATE) -> None:
        """Set the rules of `state` (the initial state by default)."""
        self._grammar[state] = list(rules)

    def tokenize(self, data: str) -> list[Token]:
        """
        Analyze `data` and return the list of tokens describing its structure.

        Tokenizing stops when the state stack runs empty, when no rule of the
        current state matches at the current position, or when empty matches
        keep switching states without consuming any input.
        """
        tokens: list[Token] = []
        states: list[str] = [INITIAL_STATE]

        pos = 0
        current: Optional[Token] = None
        # Stacks seen at `pos` and the depth the stack had when `pos` was reached
        seen: set[tuple[str, ...]] = set()
        depth = len(states)
        while pos < len(data) and states:
            state = states[-1]
            rules = self._grammar.get(state)
            if rules is None:
                raise KeyError(f"No rules defined for state '{state}'")

            # More pushes than states without moving forward can only repeat
            stack = tuple(states)
            if stack in seen or len(states) - depth > len(self._grammar):
                logger.warning(f"Rules keep switching states at position {pos} without consuming input, stopping.")
                break
            seen.add(stack)

            for rule in rules:
                token = rule.get_token(data, pos)
                if token is None:
                    continue
                # Empty matches would never advance
                if token.end == pos and rule.next_state is None:
                    continue

                if (current is not None and current.type == token.type
                        and current.type in self._joined_types):
                    current.append(token)
                else:
                    if current is not None and current.type not in self._ignored_types:
                        tokens.append(current)
                    current = token

                if token.end != pos:
                    seen.clear()
                pos = token.end

                if rule.next_state == POP_STATE:
                    states.pop()
                elif rule.next_state is not None:
                    states.append(rule.next_state)
                if not seen:
                    depth = len(states)
                break
            else:
                logger.warning(f"No rule of state '{state}' matches at position {pos}, stopping.")
                break

        if current is not None and current.type not in self._ignored_types:
            tokens.append(current)

        return tokens
