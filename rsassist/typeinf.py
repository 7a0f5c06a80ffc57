"""Helpers used when inferring the types of Rust expressions."""

from __future__ import annotations

import enum
from typing import Optional


class BinOpKind(enum.Enum):
    """Binary operators of the Rust expression grammar."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    REM = "%"
    AND = "&&"
    OR = "||"
    BIT_XOR = "^"
    BIT_AND = "&"
    BIT_OR = "|"
    SHL = "<<"
    SHR = ">>"
    EQ = "=="
    LT = "<"
    LE = "<="
    NE = "!="
    GE = ">="
    GT = ">"


_OPERATOR_TRAITS = {
    BinOpKind.ADD: "Add",
    BinOpKind.SUB: "Sub",
    BinOpKind.MUL: "Mul",
    BinOpKind.DIV: "Div",
    BinOpKind.REM: "Rem",
    BinOpKind.AND: "And",
    BinOpKind.OR: "Or",
    BinOpKind.BIT_XOR: "BitXor",
    BinOpKind.BIT_AND: "BitAnd",
    BinOpKind.BIT_OR: "BitOr",
    BinOpKind.SHL: "Shl",
    BinOpKind.SHR: "Shr",
}


def generate_skeleton_for_parsing(src: str) -> Optional[str]:
    """Drop the body of a braced item, keeping its header and ``{}``.

    Returns None when ``src`` has no opening brace.
    """
    brace = src.find("{")
    if brace == -1:
        return None
    return src[: brace + 1] + "}"


def get_operator_trait(op: BinOpKind) -> str:
    """Name of the trait that overloads ``op``; ``bool`` for comparisons."""
    return _OPERATOR_TRAITS.get(op, "bool")