"""Annotator interface for pluggable linguistic backends."""

from abc import ABC, abstractmethod


class AnnotatorUnavailableError(RuntimeError):
    """Raised when the configured annotator backend cannot be constructed."""


class AnnotatorInterface(ABC):
    """Sentence segmentation and span tagging consumed by the organizer engine.

    Every method returns spans exactly as they appear in the input text, in
    order of appearance. Implementations must be deterministic and hold no
    per-call state.
    """

    @abstractmethod
    def segment_sentences(self, text: str) -> list[str]:
        """Split text into sentences, keeping terminal punctuation."""

    @abstractmethod
    def tag_people(self, text: str) -> list[str]:
        """Return person name spans."""

    @abstractmethod
    def tag_places(self, text: str) -> list[str]:
        """Return place name spans."""

    @abstractmethod
    def tag_organizations(self, text: str) -> list[str]:
        """Return organization name spans."""

    @abstractmethod
    def tag_numbers(self, text: str) -> list[str]:
        """Return numeric value spans."""

    @abstractmethod
    def tag_topics(self, text: str) -> list[str]:
        """Return salient topic phrases."""

    @abstractmethod
    def tag_verbs(self, text: str) -> list[str]:
        """Return verb tokens."""

    @abstractmethod
    def tag_nouns(self, text: str) -> list[str]:
        """Return noun phrases."""
