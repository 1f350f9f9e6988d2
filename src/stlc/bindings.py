from __future__ import annotations
from typing import Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")


class Bindings(Generic[T]):
    """Immutable linked list of bindings. Extending never modifies the
    original, so a scope is dropped simply by no longer referring to it."""

    def __init__(self, key=None, val=None, next=None):
        self.key = key
        self.val = val
        self.next = next

    @staticmethod
    def from_dict(mapping: Mapping[str, T]) -> Bindings[T]:
        env = Bindings()
        for k, v in mapping.items():
            env = env.extend(k, v)
        return env

    def depth(self) -> int:
        return sum(1 for _ in self.items())

    def get(self, k: str) -> T:
        for key, val in self.items():
            if key == k:
                return val
        raise LookupError(k)

    def extend(self, k: str, v: T) -> Bindings[T]:
        return Bindings(k, v, self)

    def items(self) -> Iterator[tuple[str, T]]:
        env = self
        while env.key is not None:
            yield env.key, env.val
            env = env.next

    def __contains__(self, k: str) -> bool:
        return any(key == k for key, _ in self.items())

    def __repr__(self):
        inner = ", ".join(f"{k} : {v}" for k, v in self.items())
        return f"Bindings({inner})"
