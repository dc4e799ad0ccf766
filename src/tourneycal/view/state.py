# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Set once per invocation from the show_header setting and --no-header
_show_header: ContextVar[bool] = ContextVar("tourneycal_show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """Whether views print the tourneycal header block before their output."""
    return _show_header.get()
