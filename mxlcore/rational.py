"""Rational numbers used for edit, grain and sample rates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Rational:
    """A ratio of two integers.

    Two rationals are equal when their cross products match, so 1/2 equals 2/4.
    """

    numerator: int
    denominator: int

    def is_valid(self) -> bool:
        return self.denominator != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator == self.denominator * other.numerator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"