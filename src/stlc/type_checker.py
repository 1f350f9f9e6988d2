from __future__ import annotations
import dataclasses
import logging
from typing import TypeAlias

from stlc import abstract_syntax as ast
from stlc.bindings import Bindings
from stlc.types import Arrow, Int, Type

logger = logging.getLogger(__name__)

TEnv: TypeAlias = Bindings[Type]


class InferenceError(Exception):
    pass


@dataclasses.dataclass
class UndefinedVariable(InferenceError):
    name: str

    def __str__(self):
        return f"undefined variable {self.name}"


@dataclasses.dataclass
class NotAFunction(InferenceError):
    actual: Type

    def __str__(self):
        return f"cannot call a value of type {self.actual}"


@dataclasses.dataclass
class TypeMismatch(InferenceError):
    expected: Type
    actual: Type

    def __str__(self):
        return f"expected type {self.expected}, got {self.actual}"


def empty_tenv() -> TEnv:
    return Bindings()


def infer(expr: ast.Expression, tenv: TEnv | None = None) -> Type:
    if tenv is None:
        tenv = empty_tenv()

    match expr:
        case ast.Literal():
            return Int()
        case ast.Variable(name):
            try:
                return tenv.get(name)
            except LookupError:
                logger.debug("undefined variable %s in %r", name, tenv)
                raise UndefinedVariable(name) from None
        case ast.Abstraction(var, typ, body):
            tenv_ = tenv.extend(var, typ)
            logger.debug("entering scope %s : %s", var, typ)
            return Arrow(typ, infer(body, tenv_))
        case ast.Application(fun, arg):
            targ = infer(arg, tenv)
            tfun = infer(fun, tenv)
            match tfun:
                case Arrow(expected, tret):
                    if targ != expected:
                        logger.debug("argument mismatch in %s", expr)
                        raise TypeMismatch(expected, targ)
                    return tret
                case _:
                    logger.debug("not a function: %s", fun)
                    raise NotAFunction(tfun)
        case _:
            raise NotImplementedError(expr)


def check(ty: Type, expr: ast.Expression, tenv: TEnv | None = None):
    if tenv is None:
        tenv = empty_tenv()

    match ty, expr:
        case Arrow(targ, tret), ast.Abstraction(var, typ, body):
            if typ != targ:
                raise TypeMismatch(targ, typ)
            check(tret, body, tenv.extend(var, typ))
        case _, _:
            texp = infer(expr, tenv)
            if texp != ty:
                raise TypeMismatch(ty, texp)
