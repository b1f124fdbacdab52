# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from .errors import FailureKind

# HTTP status -> failure kind. Anything not listed maps to GENERIC.
HTTP_STATUS_FAILURE_KINDS = {
    400: FailureKind.VALIDATION,
    401: FailureKind.AUTHENTICATION,
    403: FailureKind.PERMISSION,
    404: FailureKind.NOT_FOUND,
    500: FailureKind.SERVER,
    502: FailureKind.SERVER,
    503: FailureKind.SERVER,
}


def failure_kind_for_status(status_code: int) -> FailureKind:
    return HTTP_STATUS_FAILURE_KINDS.get(status_code, FailureKind.GENERIC)
