"""Miscellaneous helpers with no better home."""


def noop(_x=None):
    """Accept an optional argument, do nothing and return None"""
    return None
