"""Typed business errors returned inside a Result

NotFoundError: a referenced entity does not exist.
ValidationError: input violates a shape, length or uniqueness rule.
"""

from src.libs.result import Error


class NotFoundError(Error):
    pass


class ValidationError(Error):
    pass
