from sqlalchemy.exc import IntegrityError


def violates_unique(exc: IntegrityError, *markers: str) -> bool:
    """
    Whether the driver error names one of the given unique constraints.

    PostgreSQL reports the constraint name; SQLite reports
    "UNIQUE constraint failed: <table>.<column>, ...", so callers pass both.
    """
    message = str(exc.orig)
    return any(marker in message for marker in markers)
