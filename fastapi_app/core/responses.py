from fastapi.responses import JSONResponse

from domain.core.errors import DomainError, DomainValidationError


def error_response(status_code: int, exc: DomainError) -> JSONResponse:
    content = {"detail": str(exc)}
    if isinstance(exc, DomainValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=content)
