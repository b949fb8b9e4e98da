"""Editor tooling for ListScript.

- server:      pygls language server (diagnostics, hover, completion, symbols)
- indexer:     per-line static index of definitions and parse errors
- repl_server: JSON-over-TCP front end to a shared Interpreter
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
