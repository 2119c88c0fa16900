"""Console output sink for rendered tree lines."""

import sys

RESET = "\033[0m"
EXISTING_STYLE = "\033[2m"
CREATED_STYLE = "\033[1;32m"


class ConsoleSink:
    """Prints tree lines, emphasising newly created directories."""

    def __init__(self, color=False, stream=None):
        self.color = color
        self.stream = sys.stdout if stream is None else stream

    def line(self, text, existed):
        if self.color:
            style = EXISTING_STYLE if existed else CREATED_STYLE
            text = f"{style}{text}{RESET}"
        print(text, file=self.stream)

    def note(self, text):
        print(text, file=self.stream)


class ListSink:
    """Collects (text, existed) pairs; used for tests and JSON output."""

    def __init__(self):
        self.lines = []
        self.notes = []

    def line(self, text, existed):
        self.lines.append((text, existed))

    def note(self, text):
        self.notes.append(text)
