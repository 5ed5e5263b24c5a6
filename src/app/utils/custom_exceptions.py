from typing import Any, List, Optional


class WorkflowError(Exception):
    """Base class for failures that end a stage request with a JSON error body."""

    error_label = "Internal Server Error"
    http_status = 500

    def __init__(self, details: str = "") -> None:
        super().__init__(details or self.error_label)
        self.details = details


class ConfigurationError(WorkflowError):
    error_label = "OpenAI API key not set"


class ProviderError(WorkflowError):
    error_label = "OpenAI API error"

    def __init__(self, details: str = "", provider_status: Optional[int] = None) -> None:
        super().__init__(details)
        self.provider_status = provider_status


class ExtractionError(WorkflowError):
    """The model reply could not be recovered as JSON; details hold the text that failed."""

    error_label = "Failed to parse response from OpenAI"


class SchemaMismatchError(WorkflowError):
    error_label = "Response from OpenAI did not match the expected schema"

    def __init__(self, details: str = "", errors: Optional[List[Any]] = None) -> None:
        super().__init__(details)
        self.errors = errors or []


class WorkflowLinkError(WorkflowError, ValueError):
    error_label = "Invalid workflow link request"
    http_status = 400
