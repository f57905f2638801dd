"""
Base interface for document extractors.

Defines the contract for pluggable text extraction implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..shared import DocumentFormat, ExtractionResult


class DocumentExtractor(ABC):
    """
    Abstract base class for resume document extractors.

    Implementations turn the bytes of one uploaded document into raw text
    plus layout metadata. They never write files or touch the network, and
    keep no per-document state, so one instance may serve many parses.
    """

    format: DocumentFormat

    @abstractmethod
    def extract(self, data: bytes) -> ExtractionResult:
        """
        Extract raw text and layout metadata from an in-memory document.

        Args:
            data: The complete document buffer

        Returns:
            ExtractionResult with the backend's text (not yet normalized)
            and the detected ExtractionMetadata.

        Raises:
            ExtractionFailure: If the backend cannot produce text
        """
        pass
