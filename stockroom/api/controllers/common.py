"""
Helpers shared by the API controllers
"""

from stockroom.models import ResultStatus

STATUS_CODES = {
    ResultStatus.OK: 200,
    ResultStatus.VALIDATION_FAILED: 400,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.STORAGE_ERROR: 500,
}


def result_response(result, schema=None, many=False, success_code=200):
    """Turn a ServiceResult into a (body, status) pair"""
    if not result.is_ok:
        return {
            'error': result.status.value,
            'message': result.reason,
        }, STATUS_CODES[result.status]

    if schema is None or result.value is None:
        return {'status': result.status.value}, success_code

    if many:
        return schema.dump([item.to_dict() for item in result.value], many=True), success_code
    return schema.dump(result.value.to_dict()), success_code


def parse_bool(value) -> bool:
    return str(value).lower() in ('1', 'true', 'yes')
