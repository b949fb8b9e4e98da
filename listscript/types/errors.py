class ListScriptError(Exception):
    """ Base class for all host-level ListScript errors"""
    pass

class ListScriptSyntaxError(ListScriptError):
    """ Raised when a line of source cannot be parsed"""

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.column = column

    def __str__(self) -> str:
        if self.column is None:
            return self.message
        return f"{self.message} (column {self.column + 1})"

class ListScriptUnboundSymbol(ListScriptError):
    """ Raised when a name is looked up before it is bound"""
