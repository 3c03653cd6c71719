"""Aspect complexity weights.

A primal aspect weighs ``primal_weight``. A compound aspect weighs the sum of
its recipe components, evaluated transitively and memoized. Evaluation keeps an
explicit stack instead of recursing, together with an ``in_progress`` set that
is separate from the finished ``weights`` table. A component that is still in
progress closes a cycle and contributes 0 to the aspect that references it.

Notes:
    Cycle resolution depends on evaluation order. For ``a = [b]`` and
    ``b = [a, x]`` evaluated from ``a``, ``b`` is finished first with the ``a``
    leg contributing 0, so ``b == w(x)`` and ``a == w(x)``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from aspectgraph.types import Aspect


def compute_aspect_weights(
    combinations: Mapping[Aspect, Sequence[Aspect]],
    primal: Iterable[Aspect],
    order: Iterable[Aspect],
    primal_weight: float = 1,
) -> Dict[Aspect, float]:
    """Compute weights for every aspect in ``order`` and everything it depends on.

    Args:
        combinations: Compound aspect -> ordered components.
        primal: Aspects that weigh ``primal_weight`` regardless of any recipe.
        order: Aspects to evaluate, in order. Cycle resolution follows it.
        primal_weight: Weight of a primal aspect.

    Returns:
        Mapping of aspect to weight. Aspects without a recipe that are not
        primal weigh 0.
    """
    weights: Dict[Aspect, float] = {aspect: primal_weight for aspect in primal}
    in_progress = set()

    for root in order:
        if root in weights:
            continue

        # Frames are [aspect, next component index, accumulated weight]
        stack: List[list] = [[root, 0, 0]]
        in_progress.add(root)
        while stack:
            frame = stack[-1]
            aspect, idx, total = frame
            components = combinations.get(aspect, ())

            if idx == len(components):
                stack.pop()
                in_progress.discard(aspect)
                weights[aspect] = total
                if stack:
                    stack[-1][1] += 1
                    stack[-1][2] += total
                continue

            component = components[idx]
            if component in weights:
                frame[1] += 1
                frame[2] += weights[component]
            elif component in in_progress:
                # Cyclic leg
                frame[1] += 1
            else:
                in_progress.add(component)
                stack.append([component, 0, 0])

    return weights
