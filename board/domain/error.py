"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user = user
        super().__init__(
            f"User {user} is not authorized to {action} {resource} {resource_id}"
        )


class PostNotFoundError(NotFoundError):
    """Raised when no post exists with the requested id."""

    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__("Post", str(post_id))


class PostNotUpdatableError(NotAuthorizedError):
    """Raised when someone other than the author tries to update a post."""

    def __init__(self, post_id: int, user: str):
        self.post_id = post_id
        super().__init__("update", "post", str(post_id), user)


class PostNotDeletableError(NotAuthorizedError):
    """Raised when someone other than the author tries to delete a post."""

    def __init__(self, post_id: int, user: str):
        self.post_id = post_id
        super().__init__("delete", "post", str(post_id), user)
