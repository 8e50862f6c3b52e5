"""
Featured image lookup.

Front matter names a featured image by its bare filename (``cover``), while the
markdown renderer has already rewritten the image to its published path
(``/static/3f2a-cover.jpg``). The published path is recovered by searching the
rendered HTML for the ``src`` attribute that mentions the filename.
"""

import re
from typing import Optional

SRC_PREFIX = 'src="'

# Anything left in the last path segment after the name (hash suffixes), then
# an alphabetic extension that is not itself followed by more name characters.
_SEGMENT_TAIL = r'[^"/]*?\.[A-Za-z]{2,4}(?![\w.-])'


def _anchor_pattern(name):
    return re.compile(re.escape(SRC_PREFIX) + r'[^"]*?' + name + _SEGMENT_TAIL)


def _boundary_pattern(name):
    return re.compile(name + _SEGMENT_TAIL)


def locate(html: str, bare_filename: Optional[str]) -> Optional[str]:
    """
    Return the image path embedded in ``html`` for ``bare_filename``.

    The left edge is the first ``src="`` whose value carries the filename and
    an extension; the right edge is the end of the first filename+extension
    occurrence from there on. Returns None when either search fails or when no
    filename is given.
    """
    if not bare_filename or not html:
        return None

    name = re.escape(bare_filename)
    anchor = _anchor_pattern(name).search(html)
    if anchor is None:
        return None

    start = anchor.start() + len(SRC_PREFIX)
    boundary = _boundary_pattern(name).search(html, start)
    if boundary is None:
        return None

    return html[start:boundary.end()]
