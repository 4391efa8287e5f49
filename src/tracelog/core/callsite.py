"""Call-site capture for log calls.

Locations are taken from the caller's frame using the same ``stacklevel``
convention as :mod:`logging`: ``stacklevel=1`` means the code that called the
function asking for the call-site.
"""

import sys
from dataclasses import dataclass

from tracelog.core.formatting import location_string


@dataclass(frozen=True)
class CallSite:
    """Where a log call was made.

    Attributes:
        filename: Path of the source file.
        function: Name of the calling function.
        line: Line number of the call.
    """

    filename: str = ""
    function: str = ""
    line: int = 0

    def __str__(self) -> str:
        return location_string(self.filename, self.function, self.line)


def capture(stacklevel: int = 1) -> CallSite:
    """Return the call-site ``stacklevel`` frames above the caller.

    Args:
        stacklevel: 1 is the caller of the function invoking ``capture``.

    Returns:
        The CallSite, or an empty CallSite when the stack is not that deep.
    """
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return CallSite()
    code = frame.f_code
    return CallSite(code.co_filename, code.co_name, frame.f_lineno)
