"""Minimal LSP server for numlit: literal diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from numlit import __version__
from numlit.errors import ScriptError
from numlit.scanner import check_source

server = LanguageServer(
    "numlit-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _to_diagnostic(err: ScriptError) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=err.span.start.line - 1, character=err.span.start.column - 1),
            end=Position(line=err.span.end.line - 1, character=err.span.end.column - 1),
        ),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="numlit",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Check every integer literal in the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = [_to_diagnostic(err) for err in check_source(doc.source)]
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
