"""Deterministic finite automata over the binary alphabet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence


@dataclass(frozen=True)
class Step:
    """One move of the automaton: from ``state`` on ``symbol`` to ``next_state``."""

    state: str
    symbol: str
    next_state: str

    def __str__(self) -> str:
        return f"{self.state} -> {self.symbol} -> {self.next_state}"


@dataclass
class Dfa:
    """A DFA whose table gives, per state, the next state on ``0`` and on ``1``.

    Any symbol other than ``0`` is read as ``1``.
    """

    transitions: Mapping[str, Sequence[str]]
    initial: str
    finals: Iterable[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        self.transitions = {state: tuple(row) for state, row in self.transitions.items()}
        self.finals = frozenset(self.finals)
        if self.initial not in self.transitions:
            raise ValueError(f"initial state {self.initial!r} is not a state")
        unknown_finals = self.finals - self.transitions.keys()
        if unknown_finals:
            raise ValueError(f"final states {sorted(unknown_finals)} are not states")
        for state, row in self.transitions.items():
            if len(row) != 2:
                raise ValueError(f"state {state!r} needs exactly two next states")
            for target in row:
                if target not in self.transitions:
                    raise ValueError(f"state {state!r} leads to unknown state {target!r}")

    def step(self, state: str, symbol: str) -> str:
        """Return the state reached from ``state`` on ``symbol``."""
        try:
            row = self.transitions[state]
        except KeyError:
            raise ValueError(f"unknown state {state!r}") from None
        return row[0 if symbol == "0" else 1]

    def trace(self, word: str) -> list[Step]:
        """Return every move made while reading ``word`` from the initial state."""
        steps = []
        state = self.initial
        for symbol in word:
            following = self.step(state, symbol)
            steps.append(Step(state, symbol, following))
            state = following
        return steps

    def accepts(self, word: str) -> bool:
        """Tell whether reading ``word`` ends in a final state."""
        steps = self.trace(word)
        last = steps[-1].next_state if steps else self.initial
        return last in self.finals