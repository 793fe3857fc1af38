"""Word- and line-oriented text input and output for the game."""

import sys


class Console:
    """Reads whitespace-separated words and lines, and writes text."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._buffer = ""
        self._eof = False

    def _fill(self):
        """Append the next line of input to the buffer; False at end of input."""
        if self._eof:
            return False
        line = self._stdin.readline()
        if not line:
            self._eof = True
            return False
        self._buffer += line
        return True

    def _skip_whitespace(self):
        """Drop leading whitespace; False if the input ends first."""
        while True:
            stripped = self._buffer.lstrip()
            self._buffer = stripped
            if stripped:
                return True
            if not self._fill():
                return False

    def read_word(self):
        """Return the next whitespace-separated word.

        Raises EOFError when no word is left in the input.
        """
        if not self._skip_whitespace():
            raise EOFError("end of input")
        while True:
            for index, char in enumerate(self._buffer):
                if char.isspace():
                    word = self._buffer[:index]
                    self._buffer = self._buffer[index:]
                    return word
            if not self._fill():
                word = self._buffer
                self._buffer = ""
                return word

    def read_line(self):
        """Skip leading whitespace, then return the rest of the line.

        Returns an empty string when the input has ended.
        """
        if not self._skip_whitespace():
            return ""
        while "\n" not in self._buffer:
            if not self._fill():
                line = self._buffer
                self._buffer = ""
                return line
        line, _, self._buffer = self._buffer.partition("\n")
        return line

    def write(self, text):
        """Write text as it is."""
        self._stdout.write(text)