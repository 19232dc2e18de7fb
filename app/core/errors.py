class OrcaSignalError(Exception):
    """Base for every failure a registry, session or hook operation raises.

    Errors are raised before any state is touched, so a failed call never
    leaves a partial write behind.
    """

    status_code = 400

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__class__.__doc__)


class Unauthorized(OrcaSignalError):
    """Caller lacks the required role or ownership"""

    status_code = 403


class OutOfRange(OrcaSignalError):
    """Risk score must be between 0 and 100"""


class InvalidKey(OrcaSignalError):
    """Identifier must not be empty or zero"""


class NotActive(OrcaSignalError):
    """Session is not active"""

    status_code = 409


class Expired(OrcaSignalError):
    """Session has expired"""

    status_code = 409


class LimitReached(OrcaSignalError):
    """Session action limit reached"""

    status_code = 409


class NotExpired(OrcaSignalError):
    """Session has not expired yet"""

    status_code = 409
