"""Static recipe table describing how compound aspects are produced."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Tuple

from aspectgraph.types import Aspect


@dataclass(frozen=True)
class RecipeBook:
    """Immutable recipe table.

    Attributes:
        primal: Base aspects, in declaration order.
        compound: Derived aspects, in declaration order.
        combinations: Compound aspect -> ordered component aspects.
    """

    primal: Tuple[Aspect, ...]
    compound: Tuple[Aspect, ...]
    combinations: Mapping[Aspect, Tuple[Aspect, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "primal", tuple(self.primal))
        object.__setattr__(self, "compound", tuple(self.compound))
        object.__setattr__(
            self,
            "combinations",
            MappingProxyType(
                {key: tuple(parts) for key, parts in self.combinations.items()}
            ),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RecipeBook:
        """Construct from a ``{"primal", "compound", "combinations"}`` mapping.

        The mapping is expected to be validated already (see
        ``aspectgraph.model.loader``).
        """
        return cls(
            primal=tuple(data["primal"]),
            compound=tuple(data["compound"]),
            combinations=data.get("combinations") or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primal": list(self.primal),
            "compound": list(self.compound),
            "combinations": {k: list(v) for k, v in self.combinations.items()},
        }

    @property
    def declared(self) -> FrozenSet[Aspect]:
        """Aspects declared as primal or compound."""
        return frozenset(self.primal) | frozenset(self.compound)

    def referenced(self) -> Iterator[Aspect]:
        """Yield every identifier mentioned by the table, declared ones first.

        Each identifier is yielded once, in first-mention order.
        """
        seen = set()
        for aspect in chain(self.primal, self.compound, self._recipe_mentions()):
            if aspect not in seen:
                seen.add(aspect)
                yield aspect

    def undeclared(self) -> Tuple[Aspect, ...]:
        """Identifiers mentioned by recipes but never declared."""
        declared = self.declared
        return tuple(a for a in self.referenced() if a not in declared)

    def _recipe_mentions(self) -> Iterator[Aspect]:
        for compound, components in self.combinations.items():
            yield compound
            yield from components

