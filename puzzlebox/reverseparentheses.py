"""Reverse the text inside each pair of parentheses."""

from __future__ import annotations

from itertools import chain


def reverse(s: str) -> str:
    """Reverse every parenthesised group, innermost first, dropping the parentheses.

    An unclosed '(' is dropped without reversing anything. A ')' with no
    matching '(' reverses everything before it and leaves the rest as is.
    """
    stack: list[list[str]] = [[]]
    for position, ch in enumerate(s):
        if ch == "(":
            stack.append([])
        elif ch == ")":
            if len(stack) == 1:
                return "".join(reversed(stack[0])) + s[position + 1 :]
            group = stack.pop()
            group.reverse()
            stack[-1].extend(group)
        else:
            stack[-1].append(ch)
    return "".join(chain.from_iterable(stack))