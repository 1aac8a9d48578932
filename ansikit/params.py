"""Bounded list of control-sequence parameters with subparameters."""

from __future__ import annotations

from typing import Iterator, List, Tuple

MAX_PARAMS = 32


class Params:
    """Parameters of a control sequence, each a group of one or more subparameters."""

    def __init__(self) -> None:
        self._groups: List[List[int]] = []
        self._open = False
        self._len = 0

    def __len__(self) -> int:
        """Return the total number of parameters and subparameters."""
        return self._len

    def is_empty(self) -> bool:
        """Return True if no parameters are present."""
        return self._len == 0

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        """Yield each parameter as a tuple of its subparameters."""
        return (tuple(group) for group in self._groups)

    def is_full(self) -> bool:
        """Return True if there is no room for another value."""
        return self._len == MAX_PARAMS

    def clear(self) -> None:
        """Remove all parameters."""
        self._groups = []
        self._open = False
        self._len = 0

    def _add(self, item: int) -> None:
        if self.is_full():
            raise IndexError(f"no room for more than {MAX_PARAMS} parameters")
        if not isinstance(item, int) or not 0 <= item <= 0xFFFF:
            raise ValueError(f"parameter must be in 0..=65535, got {item!r}")
        if self._open:
            self._groups[-1].append(item)
        else:
            self._groups.append([item])
        self._len += 1

    def push(self, item: int) -> None:
        """Add a value that completes the current parameter."""
        self._add(item)
        self._open = False

    def extend(self, item: int) -> None:
        """Add a subparameter to the current parameter and keep it open."""
        self._add(item)
        self._open = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Params):
            return NotImplemented
        return self._groups == other._groups and self._open == other._open

    def __repr__(self) -> str:
        body = ";".join(":".join(str(value) for value in group) for group in self._groups)
        return f"[{body}]"