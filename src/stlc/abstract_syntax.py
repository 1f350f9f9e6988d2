from __future__ import annotations
import abc
import dataclasses

from stlc.types import Type


class Expression(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class Literal(Expression):
    val: int

    def __str__(self):
        return str(self.val)


@dataclasses.dataclass(frozen=True)
class Variable(Expression):
    name: str

    def __str__(self):
        return self.name


@dataclasses.dataclass(frozen=True)
class Abstraction(Expression):
    var: str
    typ: Type
    body: Expression

    def __str__(self):
        return f"(λ ({self.var} : {self.typ}) {self.body})"


@dataclasses.dataclass(frozen=True)
class Application(Expression):
    fun: Expression
    arg: Expression

    def __str__(self):
        return f"({self.fun} {self.arg})"
