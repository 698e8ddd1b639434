"""Domain errors."""


class InvalidContactError(ValueError):
    """A contact field is missing or malformed. `field` names the offending argument."""

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        self.reason = reason or f"{field} must not be None."
        super().__init__(self.reason)
