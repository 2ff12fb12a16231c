class ExternalCollaboratorError(Exception):
    """A third-party dependency (file parser, remote API) failed; shown as a one-line status."""


class DocumentError(ExternalCollaboratorError):
    UNSUPPORTED = "unsupported"
    CORRUPT = "corrupt"
    TOO_LARGE = "too_large"

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind


class MediaResolutionError(ExternalCollaboratorError):
    pass
