"""Shared fixtures: small recipe tables and solvers built from them."""

from __future__ import annotations

import pytest

from aspectgraph.model.recipes import RecipeBook
from aspectgraph.solver import ResearchSolver


@pytest.fixture
def energy_recipes() -> RecipeBook:
    #  fire ── energy ── air
    return RecipeBook(
        primal=("fire", "air"),
        compound=("energy",),
        combinations={"energy": ("fire", "air")},
    )


@pytest.fixture
def energy_solver(energy_recipes) -> ResearchSolver:
    return ResearchSolver.build(energy_recipes)


@pytest.fixture
def diamond_recipes() -> RecipeBook:
    # Weights:
    #   a=1 b=1 c=1
    #   ab=2 bc=2 ac=2
    #   abc = ab + c = 3
    #   heavy = abc + ab = 5
    #
    #  a ── ab ── b ── bc ── c
    #  │                     │
    #  └──────── ac ─────────┘
    #  ab ── abc ── c,  abc ── heavy ── ab
    return RecipeBook(
        primal=("a", "b", "c"),
        compound=("ab", "bc", "ac", "abc", "heavy"),
        combinations={
            "ab": ("a", "b"),
            "bc": ("b", "c"),
            "ac": ("a", "c"),
            "abc": ("ab", "c"),
            "heavy": ("abc", "ab"),
        },
    )


@pytest.fixture
def diamond_solver(diamond_recipes) -> ResearchSolver:
    return ResearchSolver.build(diamond_recipes)


@pytest.fixture
def split_recipes() -> RecipeBook:
    # Two components with no connection between them:
    #   x ── xy ── y        p ── pq ── q
    return RecipeBook(
        primal=("x", "y", "p", "q"),
        compound=("xy", "pq"),
        combinations={"xy": ("x", "y"), "pq": ("p", "q")},
    )


@pytest.fixture
def cyclic_recipes() -> RecipeBook:
    # loop_a needs loop_b, loop_b needs loop_a; "ghost" is never declared
    return RecipeBook(
        primal=("fire", "air"),
        compound=("loop_a", "loop_b", "echo"),
        combinations={
            "loop_a": ("loop_b", "fire"),
            "loop_b": ("loop_a", "air"),
            "echo": ("echo", "ghost"),
            "ghost": ("fire", "air"),
        },
    )


@pytest.fixture(scope="session")
def default_solver() -> ResearchSolver:
    return ResearchSolver.default()
