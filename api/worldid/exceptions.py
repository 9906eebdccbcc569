"""
Errors raised by the World ID verification flow.

Every rejection is a `WorldIdError` with a stable `code`. Mapping them to a
transport (HTTP status, lambda response, ...) is done by the caller.
"""


class WorldIdError(Exception):
    code = "WORLDID_ERROR"
    default_message = "World ID verification failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(WorldIdError):
    code = "CONFIGURATION_ERROR"
    default_message = "World ID configuration missing. Please set WORLDID_APP_ID and WORLDID_API_KEY."


class AccountNotFound(WorldIdError):
    code = "ACCOUNT_NOT_FOUND"
    default_message = "User not found"


class AlreadyVerified(WorldIdError):
    code = "ALREADY_VERIFIED"
    default_message = "User is already verified with World ID"


class MissingFields(WorldIdError):
    code = "MISSING_FIELDS"
    default_message = "Missing required fields"

    def __init__(self, fields=None, message=None):
        self.fields = list(fields or [])
        super().__init__(message)


class InvalidFormat(WorldIdError):
    code = "INVALID_FORMAT"
    default_message = "Invalid proof format"


class InvalidSession(WorldIdError):
    code = "INVALID_SESSION"
    default_message = "Invalid verification session"


class NullifierAlreadyUsed(WorldIdError):
    code = "NULLIFIER_ALREADY_USED"
    default_message = "This World ID has already been used for verification"


class RemoteVerificationFailed(WorldIdError):
    code = "REMOTE_VERIFICATION_FAILED"
    default_message = "Verification failed"

    def __init__(self, detail=None, remote_code=None):
        self.detail = detail or self.default_message
        self.remote_code = remote_code
        super().__init__(self.detail)
