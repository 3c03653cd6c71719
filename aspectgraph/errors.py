"""Exceptions raised at the solver boundary."""

from __future__ import annotations

from typing import Hashable


class InvalidProblemError(ValueError):
    """A research problem violates the solver's input contract."""


class InvalidAspectError(InvalidProblemError):
    """A search endpoint is not a declared primal or compound aspect."""

    def __init__(self, aspect: Hashable) -> None:
        super().__init__(f"Invalid aspect provided: '{aspect}'")
        self.aspect = aspect
