"""Polynomials in two variables stored as an ordered list of terms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coeff * x**exp_x * y**exp_y``."""

    coeff: int
    exp_x: int
    exp_y: int

    def __str__(self) -> str:
        return f"{self.coeff}*x^{self.exp_x}*y^{self.exp_y}"


class Polynomial:
    """Terms kept in the order they were added."""

    def __init__(self) -> None:
        self._terms: list[Term] = []

    def add_term(self, coeff: int, exp_x: int, exp_y: int) -> Term:
        """Append a term and return it."""
        term = Term(coeff, exp_x, exp_y)
        self._terms.append(term)
        return term

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __str__(self) -> str:
        """Render the terms; positive coefficients are preceded by ``+``."""
        if not self._terms:
            return "Empty list"
        rendered = "".join(
            (" + " if term.coeff > 0 else "") + str(term) for term in self._terms
        )
        return rendered.lstrip()