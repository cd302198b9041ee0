## Application exceptions


class MissingCredentialError(Exception):
    """Raised when a generation is requested before an API key is configured."""


class FormValidationError(ValueError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__("Please fill in all fields")


class GenerationInProgressError(Exception):
    """Raised when a browser session submits while its previous request is pending."""


class LLMResponseError(RuntimeError):
    """The model replied, but without any usable text."""


class RoadmapDecodeError(ValueError):
    """Model output could not be decoded into a CareerRoadmap."""
