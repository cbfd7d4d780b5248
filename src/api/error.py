from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


BAD_REQUEST_CODES = {
    "INVALID_MONTH",
    "INVALID_YEAR",
    "INVALID_QUANTITY",
    "INVALID_ROLE",
    "INVALID_STATUS",
    "INVALID_DATE_RANGE",
    "INVALID_TARGET_VALUE",
    "INVALID_EMISSION_FACTOR",
    "INVALID_PLAN",
    "INVALID_PLAN_TYPE",
    "FACTORY_REQUIRED",
    "SOURCE_INACTIVE",
}

CONFLICT_CODES = {
    "DUPLICATE_PERIOD_ENTRY",
    "FACTORY_CODE_EXISTS",
    "EMAIL_ALREADY_EXISTS",
    "INVITATION_ALREADY_EXISTS",
    "FACTORY_HAS_RECORDS",
    "SOURCE_HAS_RECORDS",
    "USER_HAS_RECORDS",
    "SOURCE_NOT_PENDING",
}

STATUS_BY_CODE = {
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "USER_INACTIVE": status.HTTP_403_FORBIDDEN,
    "USER_LIMIT_REACHED": status.HTTP_402_PAYMENT_REQUIRED,
    "FACTORY_LIMIT_REACHED": status.HTTP_402_PAYMENT_REQUIRED,
    "NO_FACTORY_ASSIGNED": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error):
    """Map a use case error code to ClientError with its HTTP status, else ServerError"""
    if error.code in STATUS_BY_CODE:
        raise ClientError(error, status_code=STATUS_BY_CODE[error.code])
    if error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in CONFLICT_CODES:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)
