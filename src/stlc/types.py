from __future__ import annotations
import abc
import dataclasses


class Type(abc.ABC):
    def __str__(self):
        return f"{self.__class__.__name__}"


@dataclasses.dataclass(frozen=True)
class Int(Type):
    pass


@dataclasses.dataclass(frozen=True)
class Arrow(Type):
    targ: Type
    tret: Type

    @staticmethod
    def of(*types: Type) -> Arrow:
        """Build the curried function type `t1 -> (t2 -> ... tn)`"""
        if len(types) < 2:
            raise ValueError("a function type needs at least two types", types)
        *targs, ty = types
        for targ in reversed(targs):
            ty = Arrow(targ, ty)
        return ty

    def __str__(self):
        return f"({self.targ} -> {self.tret})"
