"""Custom exceptions for captionsync."""


class CaptionSyncError(Exception):
    """Base exception for all errors."""

    pass


class InvalidCaptionSetError(CaptionSyncError):
    """A caption set could not be serialized."""

    def __init__(self, message: str, language: str = None):
        super().__init__(message)
        self.language = language
