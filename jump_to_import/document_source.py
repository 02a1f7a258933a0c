"""Read-only view of the active document and the text under the cursor."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class DocumentSource(Protocol):
    """What the resolver needs to know about the active document."""

    def get_active_document_text(self) -> str: ...

    def get_active_document_path(self) -> str: ...

    def get_selection_or_word_under_cursor(self) -> str: ...

    def get_receiver_of_word_under_cursor(self) -> str | None: ...


@dataclass(frozen=True)
class TextDocumentSource:
    """A document held in memory, with the cursor word given explicitly."""

    text: str
    path: str
    word: str
    receiver: str | None = None  # object the word is accessed on (`receiver.word`)

    @classmethod
    def from_file(
        cls, path: str, word: str, receiver: str | None = None
    ) -> "TextDocumentSource":
        """Load a document from disk."""
        text = Path(path).read_text(encoding="utf-8")
        return cls(
            text=text, path=str(Path(path).absolute()), word=word, receiver=receiver
        )

    def get_active_document_text(self) -> str:
        """Return the full document text."""
        return self.text

    def get_active_document_path(self) -> str:
        """Return the absolute document path."""
        return self.path

    def get_selection_or_word_under_cursor(self) -> str:
        """Return the selected text or the word under the cursor."""
        return self.word

    def get_receiver_of_word_under_cursor(self) -> str | None:
        """Return the word before a `.` preceding the cursor word, if any."""
        return self.receiver
