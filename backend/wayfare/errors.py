"""Application error taxonomy — every error maps to one HTTP status and the shared envelope."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, errors: list[FieldError] | None = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)

    def to_envelope(self) -> dict:
        body = {"status": "error", "message": self.message}
        if self.errors:
            body["errors"] = [asdict(e) for e in self.errors]
        return body


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Validation errors"

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, [FieldError(field, message)])


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class UnavailableError(AppError):
    """Business-rule capacity failure (seats, rooms, vehicle)."""

    status_code = 400
    default_message = "Not available"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Not authorized to access this route"


class InternalError(AppError):
    status_code = 500


_LOCATION_ROOTS = {"body", "query", "path", "header"}


def field_errors(errors: list[dict]) -> list[FieldError]:
    """Flatten pydantic/FastAPI error dicts into ``{field, message}`` pairs."""
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        result.append(FieldError(".".join(loc) or "request", err.get("msg", "Invalid value")))
    return result
