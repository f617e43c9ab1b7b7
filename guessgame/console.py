"""Line-oriented terminal I/O.

Every function takes the writer and the reader explicitly. A writer is
anything with ``write`` and ``flush`` (``sys.stdout``, ``io.StringIO``),
a reader anything with ``readline`` (``sys.stdin``, ``io.StringIO``).
"""

import re

PROMPT = "> "

_unsigned = re.compile(r"\+?[0-9]+")


def write(writer, text):
    writer.write(text)
    writer.flush()


def prompt(writer, reader):
    """Print the prompt marker, read one line and return it stripped.

    Raises:
        EOFError: The reader has no more lines.
    """
    write(writer, PROMPT)
    line = reader.readline()
    if not line:
        raise EOFError("input stream closed")
    write(writer, "\n")
    return line.strip()


def parse_unsigned(text, low=0, high=None):
    """Parse text as an unsigned integer in [low, high].

    Returns None if the text is not made of ASCII digits (with an optional
    leading "+") or if the value falls outside of the range.
    """
    if not _unsigned.fullmatch(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # Longer than the interpreter allows for int conversion
        return None
    if value < low or (high is not None and value > high):
        return None
    return value
