"""
Repository exceptions
"""


class RepositoryError(Exception):
    """Base class for persistence failures raised by repositories"""


class DuplicateKeyError(RepositoryError):
    """A unique key (category or product code) is already taken"""

    def __init__(self, entity: str, code: str):
        self.entity = entity
        self.code = code
        super().__init__(f"{entity} with code {code} already exists")


class StorageError(RepositoryError):
    """The underlying store failed to complete the operation"""


class ConstraintViolationError(RepositoryError):
    """A store constraint other than the code's unique index rejected the write"""
