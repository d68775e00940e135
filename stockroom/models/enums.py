"""
Model Enums
"""

from enum import Enum


class ResultStatus(Enum):
    OK = "ok"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"
