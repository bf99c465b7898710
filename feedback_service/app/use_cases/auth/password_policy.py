from feedback_service.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def validate_password(password: str) -> Result[None]:
    """
    Validate password length.

    Returns:
        Result with None if valid, or INVALID_PASSWORD Error
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
            )
        )

    return Return.ok(None)
