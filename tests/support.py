import io

from rich.console import Console

from detective.narrator import custom_theme


class ScriptedConsole:
    """A rich console that records output and answers input() from a script."""
    def __init__(self, lines):
        self.lines = list(lines)
        self.buffer = io.StringIO()
        self._console = Console(file=self.buffer, theme=custom_theme, width=120, color_system=None)

    def print(self, *args, **kwargs):
        self._console.print(*args, **kwargs)

    def input(self, prompt=""):
        self._console.print(prompt, end="")
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    @property
    def text(self):
        return self.buffer.getvalue()
