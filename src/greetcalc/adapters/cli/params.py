"""Click parameter types for numeric operands."""

from __future__ import annotations

import click

from greetcalc.domain.behaviors import Number


class NumberParamType(click.ParamType):
    """Accept an ``int`` literal, else anything ``float()`` understands.

    Keeps integer arithmetic exact (``add 2 3`` prints ``5``, not ``5.0``)
    while still admitting ``0.5``, ``1e3``, ``inf`` and ``nan``.

    Example:
        >>> NUMBER.convert("42", None, None)
        42
        >>> NUMBER.convert("-2.5", None, None)
        -2.5
    """

    name = "number"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> Number:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()

__all__ = ["NUMBER", "NumberParamType"]
