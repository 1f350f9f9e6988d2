from stlc.abstract_syntax import Abstraction, Application, Literal, Variable
from stlc.types import Arrow, Int

IDENTITY = Abstraction("a", Int(), Variable("a"))

EXAMPLES = {
    "identity": IDENTITY,
    "apply_identity": Application(IDENTITY, Literal(10)),
    "const_higher": Abstraction(
        "a", Int(), Abstraction("b", Arrow(Int(), Int()), Variable("b"))
    ),
    "mismatch": Application(
        Abstraction("a", Arrow(Int(), Int()), Variable("a")), Literal(1)
    ),
    "not_a_function": Application(Literal(1), Literal(2)),
    "undefined": Variable("x"),
    # the argument is outside the abstraction, so `a` must not be visible there
    "scope_leak": Application(IDENTITY, Variable("a")),
}
