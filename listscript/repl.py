"""Interactive shell for ListScript. Uses cmd as backend."""

import cmd
import sys

from termcolor import colored

from listscript import config
from listscript.interpreter import Interpreter
from listscript.printer import to_display
from listscript.types.errors import ListScriptSyntaxError
from listscript.types.node import Error


class Shell(cmd.Cmd):
    """ListScript read-eval-print loop."""
    intro = config.DEFAULT_BANNER
    prompt = config.DEFAULT_PROMPT
    ERROR = "red"

    def __init__(self, interp=None, color=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.interp = interp if interp is not None else Interpreter(out=kwargs.get("stdout"))
        self.color = config.color_enabled() if color is None else color

    def _paint(self, text):
        return colored(text, self.ERROR) if self.color else text

    def _show(self, value):
        text = to_display(value)
        if isinstance(value, Error):
            text = self._paint(text)
        self.stdout.write(text + "\n")

    def read_line(self):
        """Next input line without its newline, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        return line.rstrip("\r\n") if line else None

    def cmdloop(self, intro=None):
        # cmd.Cmd turns end of input into the word 'EOF', which is a valid symbol here
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                line = self.precmd(line)
                stop = self.onecmd(line)
                stop = self.postcmd(stop, line)
        self.postloop()

    def onecmd(self, line):
        # Every line is ListScript source except 'bye'
        word = line.strip()
        if word == "bye":
            return self.do_bye("")
        if not word:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates one line of ListScript and prints each result."""
        try:
            for value in self.interp.iter_line(line):
                self._show(value)
        except ListScriptSyntaxError as ex:
            self.stdout.write(self._paint(f"Parse error: {ex}") + "\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Leaves the shell."""
        self.stdout.write("\n")
        return True

    def do_bye(self, arg):
        """Leaves the shell."""
        self.stdout.write("Bye!\n")
        return True


def run(interp=None, color=None, stdin=None, stdout=None):
    shell = Shell(interp, color, stdin=stdin, stdout=stdout)
    if stdin is not None:
        shell.use_rawinput = False
    try:
        shell.cmdloop()
    except KeyboardInterrupt:
        (stdout or sys.stdout).write("\nBye!\n")
