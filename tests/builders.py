"""Compact constructors for RawElement trees used across the test suite."""

from core.raw_element import RawElement


def el(tag, *children, text=None, attrs=None):
    """Build an element; positional arguments are its children."""
    return RawElement(tag, attrs, list(children), text)


def short_name(name):
    return el("SHORT-NAME", text=name)


def named(tag, name, *children, attrs=None):
    """Element whose first child is ``<SHORT-NAME>name</SHORT-NAME>``."""
    return el(tag, short_name(name), *children, attrs=attrs)


def ref(tag, value, dest=""):
    return el(tag, text=value, attrs={"DEST": dest} if dest else None)
