"""Exception types raised by the analysis services."""


class AnalysisError(Exception):
    """Base class for failures on the generative AI path."""


class ConfigurationMissing(AnalysisError):
    """No usable Gemini API key is configured."""


class ExternalServiceError(AnalysisError):
    """The Gemini call failed (network, timeout, rejected credential...)."""


class ResponseParseError(AnalysisError):
    """The model answered, but not with a usable JSON payload."""


class DocumentError(Exception):
    """Base class for resume document extraction failures."""


class UnsupportedFormat(DocumentError):
    pass


class ExtractionFailed(DocumentError):
    pass


class CatalogError(Exception):
    """Base class for job catalog failures."""


class JobNotFound(CatalogError):
    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class UnsupportedJobSource(CatalogError):
    pass
