"""
Custom Exceptions - PRR Platform
prr/core/exceptions.py

Exception classes for repository and request-layer operations.
"""


class RepositoryException(Exception):
    """Base exception for repository operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Entity not found in the store."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class DuplicateEntityException(RepositoryException):
    """Duplicate entity violation."""

    def __init__(self, message: str = "Entity already exists"):
        self.message = message
        super().__init__(message)


class ComparisonRequestError(Exception):
    """Two submissions cannot be compared (same ID, or wrong service)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
