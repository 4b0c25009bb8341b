"""Domain errors for Hyperlane Validator Setup."""


class SetupError(RuntimeError):
    """Raised when provisioning cannot continue."""
