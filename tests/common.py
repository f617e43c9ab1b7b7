import io


def scripted_io(*lines):
    """Return a (writer, reader) pair that replays the given input lines."""
    reader = io.StringIO("".join(f"{line}\n" for line in lines))
    return io.StringIO(), reader


class FixedSecret:
    """Secret generator that always picks the same number."""

    def __init__(self, secret):
        self.secret = secret
        self.calls = []

    def generate(self, minimum, maximum):
        self.calls.append((minimum, maximum))
        return self.secret
