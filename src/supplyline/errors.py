"""
Error types raised while resolving army configurations.

Every error is a ValueError so callers that only care about "bad input"
can catch that, while the pipeline itself distinguishes the concrete types.
"""


class SupplylineError(ValueError):
    """Base class for all configuration resolution errors."""


class MissingInputError(SupplylineError):
    """A sheet URL or ID was required but none was given."""


class InvalidIdentifierFormatError(SupplylineError):
    """A string looked like a URL but did not contain a spreadsheet ID."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid Google Sheets URL or ID: {value}")


class MissingEnvVarError(SupplylineError):
    """The environment variable holding the master sheet locator is not set."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name
        super().__init__(f"{var_name} environment variable is not set")


class MissingColumnsError(SupplylineError):
    """The header row lacks one or more required columns."""

    def __init__(
        self,
        required: list[str],
        missing: list[str],
        table_name: str | None = None,
    ) -> None:
        self.required = required
        self.missing = missing
        subject = table_name or "Table"
        super().__init__(
            f"{subject} must have columns: {', '.join(required)} "
            f"(missing: {', '.join(missing)})"
        )


class EmptyDatasetError(SupplylineError):
    """No usable rows or records were available."""


class MissingRequiredFieldError(SupplylineError):
    """A configuration record lacks a required field."""

    def __init__(self, index: int, field: str) -> None:
        self.index = index
        self.field = field
        super().__init__(
            f"Sheet configuration {index} is missing required field: {field}"
        )


class InvalidWebhookUrlError(SupplylineError):
    """A configuration record's webhook URL is not an absolute URL."""

    def __init__(self, index: int, url: str) -> None:
        self.index = index
        self.url = url
        super().__init__(f"Sheet configuration {index} has invalid webhook URL: {url}")


class ConfigLoadError(SupplylineError):
    """Any failure during a configuration load, wrapped into one shape."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Configuration loading failed: {cause}")
