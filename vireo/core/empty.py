"""
The empty-list marker.

EMPTY terminates every list chain. It is a plain object, never a pair, and
it is not callable: applying it as if it were a list raises the ordinary
TypeError at the point of misuse.

Compare with ``is``. None stays legitimate element data.
"""


class _Empty:
    """Sentinel marking the end of a list."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self):
        return "EMPTY"


EMPTY = _Empty()
