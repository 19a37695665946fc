from app.schemas.responses import FieldError


class StoreError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(Exception):
    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.message = f"{resource} not found"
        super().__init__(self.message)


class MutationFailedError(Exception):
    """The store accepted a statement but reported zero rows affected."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailed(Exception):
    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__(f"{len(errors)} validation error(s)")
