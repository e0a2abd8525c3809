from werkzeug.exceptions import HTTPException

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def get_status_code(outcome):
    """
    Determine the HTTP status code for a failed service result or an exception.
    Anything unrecognised, database errors included, is a 500.
    """
    if isinstance(outcome, HTTPException):
        return outcome.code or 500

    status_code = getattr(outcome, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    return 500
