"""Errors raised by the practice routes, each carrying the HTTP status it maps to."""


class PracticeError(Exception):
    """Base error; rendered by the server as {"error": message}."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInputError(PracticeError):
    """Request is missing audio, a target word or text (or the audio is unusable)."""
    status_code = 400


class AudioNotFoundError(PracticeError):
    status_code = 404


class ConfigurationError(PracticeError):
    """A vendor credential or local tool needed by the route is not configured."""
    status_code = 500


class UpstreamServiceError(PracticeError):
    """A vendor call failed; the message embeds the upstream error."""
    status_code = 500
