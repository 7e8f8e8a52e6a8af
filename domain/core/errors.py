class DomainError(Exception):
    pass


class DomainValidationError(DomainError):
    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(DomainError):
    pass


class MalformedIdentifierError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class UpstreamNotificationError(DomainError):
    pass


class StoreError(DomainError):
    pass
