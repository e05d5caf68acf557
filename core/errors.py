"""
Error types shared by the analysis services.

Missing identities, attributes or reference targets are not errors: they are
represented as ``None`` or empty strings in the derived records.
"""


class AnalysisError(Exception):
    """Traversal of a malformed or unexpected document shape failed."""

    def __init__(self, message: str, stage: str = ""):
        self.stage = stage
        prefix = f"{stage}: " if stage else ""
        super().__init__(f"{prefix}{message}")


class DocumentLoadError(Exception):
    """A document file could not be turned into a RawElement tree."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)
