from fastapi import status
from libs.result import Error

from src.app.use_cases.common import ErrorKind


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message or base_error.code)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message or base_error.code)


def raise_for_error(error: Error, rejected_status: int = status.HTTP_400_BAD_REQUEST):
    """Translate a use case Error into the matching HTTP exception"""
    if error.code == ErrorKind.VALIDATION_FAILED:
        raise ClientError(error, status_code=rejected_status)
    if error.code == ErrorKind.NOT_FOUND:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == ErrorKind.CONFLICT:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)
