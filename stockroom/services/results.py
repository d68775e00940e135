"""
Service results - tagged outcome of every InventoryService operation
"""

from dataclasses import dataclass
from typing import Any, Optional

from stockroom.models import ResultStatus


@dataclass
class ServiceResult:
    """Outcome of a service call: a status, the value on success, a reason on failure"""
    status: ResultStatus
    value: Any = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value=None) -> 'ServiceResult':
        return cls(ResultStatus.OK, value)

    @classmethod
    def validation_failed(cls, reason: str) -> 'ServiceResult':
        return cls(ResultStatus.VALIDATION_FAILED, reason=reason)

    @classmethod
    def not_found(cls, reason: str) -> 'ServiceResult':
        return cls(ResultStatus.NOT_FOUND, reason=reason)

    @classmethod
    def storage_error(cls, reason: str) -> 'ServiceResult':
        return cls(ResultStatus.STORAGE_ERROR, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK

    def __bool__(self):
        return self.is_ok
