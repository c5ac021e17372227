"""Exception types raised across pipeline stages."""


class PipelineError(Exception):
    """Base class for every failure the pipeline knows how to contain."""


class SourceFetchError(PipelineError):
    """One provider or one of its sub-queries could not be fetched or parsed."""

    def __init__(self, adapter: str, target: str, reason: str):
        self.adapter = adapter
        self.target = target
        self.reason = reason
        super().__init__(f"{adapter} fetch failed for {target}: {reason}")


class ClassificationError(PipelineError):
    """The oracle call or its response parsing failed for a whole chunk."""


class StorageConflictError(PipelineError):
    """Insert hit the unique source_url constraint; the record already exists."""

    def __init__(self, source_url: str):
        self.source_url = source_url
        super().__init__(f"Article already stored: {source_url}")


class StorageError(PipelineError):
    """Any persistence failure other than a uniqueness conflict."""
