"""
Rozwijanie nawiasów: od najbardziej wewnętrznych, od lewej.

Skan znak po znaku: indeks każdego '(' trafia na stos; przy ')' zdejmujemy
ostatni '(' , liczymy płaski tekst pomiędzy nimi i podstawiamy tekstową
postać wyniku w miejsce całego nawiasu (razem z ogranicznikami).
Skan kontynuujemy tuż za podstawionym tekstem.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from contracts import MalformedExpression
from ports.arithmetic import Arithmetic


def resolve(
    expression: str,
    evaluate_flat: Callable[[str], Any],
    arithmetic: Arithmetic,
    steps: Optional[list[str]] = None,
) -> Any:
    """
    Redukuje wyrażenie z nawiasami do wartości.
    evaluate_flat: liczy wyrażenie bez nawiasów (tokenizer + redukcja).
    Rzuca MalformedExpression dla niesparowanych nawiasów.
    """
    text = expression
    open_positions: list[int] = []
    i = 0

    while i < len(text):
        ch = text[i]
        if ch == "(":
            open_positions.append(i)
        elif ch == ")":
            if not open_positions:
                raise MalformedExpression(f"Unmatched ')' in {text!r}")
            left = open_positions.pop()
            inner = text[left + 1:i]

            value = evaluate_flat(inner)
            rendered = arithmetic.render(value)
            if steps is not None:
                steps.append(f"({inner}) -> {rendered}")

            text = text[:left] + rendered + text[i + 1:]
            i = left + len(rendered)
            continue
        i += 1

    if open_positions:
        raise MalformedExpression(f"Unmatched '(' in {text!r}")

    return evaluate_flat(text)
