class Listener:
    def __init__(self, console):
        """
        The Listener turns a raw console line into a one-character command.
        Only the first non-blank character counts; the rest of the line is ignored.
        """
        self.console = console

    @staticmethod
    def parse(line):
        """First non-whitespace character, lower-cased. Empty string if the line is blank."""
        for char in line:
            if not char.isspace():
                return char.lower()
        return ""

    def listen(self, prompt="> "):
        """Returns the parsed command, or None once the input stream is closed."""
        try:
            line = self.console.input(prompt)
        except EOFError:
            return None
        return self.parse(line)
