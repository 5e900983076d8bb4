"""Provisioning errors — each carries the HTTP status it is surfaced as."""


class ProvisioningError(Exception):
    """Base class for errors returned verbatim to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str | int]:
        return {"message": self.message, "status": self.status_code}


class InvalidResource(ProvisioningError):
    """The submitted resource failed validation. Fix the input and resubmit."""

    status_code = 400


class InternalError(ProvisioningError):
    """Validation could not run (environment fault, not bad input)."""

    status_code = 500


class NotFound(ProvisioningError):
    """No stored resource with the requested identifier."""

    status_code = 404
