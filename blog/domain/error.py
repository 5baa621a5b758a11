"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidTagError(ValidationError):
    """Raised when a tag is empty after trimming."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Tag name cannot be empty: {raw!r}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class BadRequestError(DomainError):
    """Raised when a request is internally inconsistent.

    Mismatched path/body identifiers, a page beyond the last one, an
    empty image upload.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when the store rejects a write post-condition."""

    def __init__(self, message: str):
        super().__init__(message)


class ImageNotSetError(DomainError):
    """Raised when a post exists but has no image attached."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post {post_id} has no image")
