from typing import Optional


class BootException(Exception):
    """Base exception for bootstrap-layer errors."""


class InvalidAliasError(BootException):
    """Raised when a path alias cannot be resolved.

    This occurs when:
    - The root of the alias is not registered.
    - An alias is registered with a target that is itself an unresolvable alias.

    Attributes:
        alias: The alias that could not be resolved.
    """

    def __init__(self, alias: str, reason: Optional[str] = None) -> None:
        self.alias = alias
        self.reason = reason
        message = f"Invalid path alias: {alias}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class InvalidConfigError(BootException):
    """Raised for invalid object configurations.

    This occurs when:
    - A configuration mapping lacks the "class" element.
    - A configured property is unknown or read-only.
    - A component is configured with values it cannot work with.
    """


class UnknownPropertyError(InvalidConfigError, AttributeError):
    """Raised when reading or writing a property that is not defined.

    Also an AttributeError, so ``hasattr`` and ``getattr`` with a default
    keep working on objects with accessor-defined properties.

    Attributes:
        owner: Name of the class the property was looked up on.
        name: The property name.
    """

    def __init__(self, owner: str, name: str, action: str = "Getting") -> None:
        super().__init__(f"{action} unknown property: {owner}.{name}")
        self.owner = owner
        self.name = name


class ReadOnlyPropertyError(InvalidConfigError, AttributeError):
    """Raised when writing or clearing a property that only has a getter.

    Attributes:
        owner: Name of the class the property was looked up on.
        name: The property name.
    """

    def __init__(self, owner: str, name: str, action: str = "Setting") -> None:
        super().__init__(f"{action} read-only property: {owner}.{name}")
        self.owner = owner
        self.name = name


class ClassNotFoundError(BootException):
    """Raised when a class identifier cannot be resolved by any strategy.

    Attributes:
        identifier: The class identifier or alias that was requested.
        reason: Optional reason for the failure.
    """

    def __init__(self, identifier: str, reason: Optional[str] = None) -> None:
        self.identifier = identifier
        self.reason = reason
        message = f"Unable to find class: {identifier}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)
