from __future__ import annotations

"""
A minimal pygls-based Language Server for ListScript.

Features:
- Text synchronization and document store
- Diagnostics: parse errors, one per offending line
- Hover: primitive signatures, keywords and locally defined names
- Completion: primitives, keywords, definitions
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from listscript_lsp.indexer import build_index, BUILTIN_SIGNATURES, KEYWORDS, DocumentIndex


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class ListScriptLanguageServer(LanguageServer):
    CMD_NAME = "listscript-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.6")
        self.documents: Dict[str, DocumentState] = {}


ls = ListScriptLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # pygls has already applied the (incremental) change to its workspace copy
    document = ls.workspace.get_text_document(uri)
    _update(uri, document.source)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, to_diagnostics(text, idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def to_diagnostics(text: str, idx: DocumentIndex) -> List[Diagnostic]:
    lines = text.splitlines()
    diags: List[Diagnostic] = []
    for d in idx.diagnostics:
        # Point at the rest of the line when the error is at its end
        line_len = len(lines[d.line]) if d.line < len(lines) else 0
        length = max(1, line_len - d.col)
        diags.append(
            Diagnostic(
                range=_mk_range(d.line, d.col, length),
                message=d.message,
                severity=DiagnosticSeverity.Error,
                source="listscript-ls",
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    contents = describe(word, state.index) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def describe(word: str, index: DocumentIndex) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if word in KEYWORDS:
        return KEYWORDS[word]
    if word in index.symbols:
        sdef = index.symbols[word]
        return f"{word} - {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    return None


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION)
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name, sig in KEYWORDS.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries (anything but whitespace and parens)
    start = pos.character
    while start > 0 and line[start - 1] not in " \t()\n\r\"":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()\n\r\"":
        end += 1
    word = line[start:end]
    return word or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
