# registration/core/errors.py


class RegistrationError(Exception):
    """Base class for every error raised by the registration service."""


class StartupError(RegistrationError):
    """The service cannot start; the entry point terminates the process."""


class ConfigurationError(StartupError):
    pass


class StoreConnectionError(StartupError):
    pass


class DuplicateEmailError(RegistrationError):
    def __init__(self, email: str):
        super().__init__(f"Email already exists: {email}")
        self.email = email


class PersistenceError(RegistrationError):
    pass
