"""Custom exceptions raised by event_dispatcher."""


class DispatcherError(RuntimeError):
    """Base error for all event dispatcher exceptions."""


class ConfigurationError(DispatcherError):
    """Raised when configuration values are invalid or missing."""


class ImmutableTargetError(DispatcherError, TypeError):
    """Raised when a listener table cannot be installed on a target."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f'Cannot apply "event_dispatcher" on a non extensible object: {target!r}'
        )


class ListenerAttributeConflictError(DispatcherError):
    """Raised when the listener table attribute already holds host data."""

    def __init__(self, target: object, attribute: str) -> None:
        self.target = target
        self.attribute = attribute
        super().__init__(
            f"{type(target).__qualname__}.{attribute} is already set to a value that is not a listener table"
        )
