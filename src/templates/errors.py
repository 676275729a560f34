class UnknownToneError(KeyError):
    """Raised when a tone id is outside the supported set."""


class UnknownTemplateError(KeyError):
    """Raised when a template id is outside the supported set."""
