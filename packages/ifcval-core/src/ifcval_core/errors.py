"""Terminal failures that abort a validation run.

Malformed IFC content never raises; it is reported as outcomes. These errors
cover misuse of the pipeline and content that cannot be treated as text.
"""


class PipelineNotInitializedError(RuntimeError):
    """Raised when a pipeline is used before ``initialize()``."""


class ContentDecodeError(ValueError):
    """Raised when supplied content cannot be decoded as text."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Unable to decode {filename} as UTF-8: {reason}")
        self.filename = filename
        self.reason = reason


def decode_content(raw: bytes, filename: str = "unknown.ifc", errors: str = "strict") -> str:
    """Decode raw file bytes as UTF-8.

    With ``errors="surrogateescape"`` undecodable bytes survive as lone
    surrogates, which the CHARACTER_ENCODING check then reports as a warning.
    """
    try:
        return raw.decode("utf-8", errors=errors)
    except UnicodeDecodeError as e:
        raise ContentDecodeError(filename, str(e)) from e
