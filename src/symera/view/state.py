# SPDX-License-Identifier: MIT

"""Per-invocation display settings shared by the report views."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_no_color_var: ContextVar[bool] = ContextVar("no_color", default=False)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_no_color(value: bool) -> None:
    """Strip colors from every report printed afterwards.

    Args:
        value: True for plain output, e.g. when piping to a file
    """
    _no_color_var.set(value)


def get_no_color() -> bool:
    return _no_color_var.get()
