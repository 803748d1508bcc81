"""Polynomials kept as ordered lists of terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

__all__ = ["Polynomial", "Term"]


@dataclass(frozen=True)
class Term:
    """One term of a polynomial: ``coefficient`` times X to ``exponent``."""

    coefficient: int
    exponent: int

    def __str__(self) -> str:
        text = str(self.coefficient) if self.coefficient < 0 else f"+{self.coefficient}"
        if self.exponent != 0:
            text += f"X{self.exponent}"
        return text


_TermLike = Union[Term, tuple[int, int]]


class Polynomial:
    """A polynomial whose terms are kept in the order they were appended.

    Addition expects both operands to list their terms by falling exponent.
    """

    def __init__(self, terms: Iterable[_TermLike] = ()) -> None:
        self._terms: list[Term] = []
        for term in terms:
            if isinstance(term, Term):
                self._terms.append(term)
            else:
                self.append(*term)

    def append(self, coefficient: int, exponent: int) -> None:
        """Add a term after the last one."""
        self._terms.append(Term(coefficient, exponent))

    def terms(self) -> list[Term]:
        """Return the terms in order."""
        return list(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __call__(self, x: int | float) -> int | float:
        """Evaluate the polynomial at ``x``."""
        return sum(term.coefficient * x**term.exponent for term in self._terms)

    def __add__(self, other: object) -> Polynomial:
        """Merge two polynomials, adding terms of equal exponent.

        Terms whose coefficients cancel to zero are left out.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = self._terms, other._terms
        i = j = 0
        while i < len(left) and j < len(right):
            p, q = left[i], right[j]
            if p.exponent == q.exponent:
                total = p.coefficient + q.coefficient
                if total != 0:
                    result.append(total, p.exponent)
                i += 1
                j += 1
            elif p.exponent > q.exponent:
                result._terms.append(p)
                i += 1
            else:
                result._terms.append(q)
                j += 1
        result._terms.extend(left[i:])
        result._terms.extend(right[j:])
        return result

    def __str__(self) -> str:
        if not self._terms:
            return "Null Polynomial"
        return " ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        pairs = [(term.coefficient, term.exponent) for term in self._terms]
        return f"Polynomial({pairs!r})"