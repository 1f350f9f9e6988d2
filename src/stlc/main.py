import logging
import sys

from stlc import type_checker
from stlc.examples import EXAMPLES


def main(argv) -> int:
    verbose = "-v" in argv or "--verbose" in argv
    names = [a for a in argv if a not in ("-v", "--verbose")] or list(EXAMPLES)

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    unknown = [name for name in names if name not in EXAMPLES]
    if unknown:
        print(f"unknown example(s): {', '.join(unknown)}")
        print(f"available: {', '.join(EXAMPLES)}")
        return 2

    status = 0
    for name in names:
        expr = EXAMPLES[name]
        print(f"{name}: {expr}")
        try:
            ty = type_checker.infer(expr, type_checker.empty_tenv())
            print(f"  : {ty}")
        except type_checker.InferenceError as e:
            print(f"  ! {type(e).__name__}: {e}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
