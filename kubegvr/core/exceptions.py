"""
Exceptions.
"""


class GVRParseError(ValueError):
    """
    A resource identifier string can't be split into group, version and resource.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"can't parse GVR {self.text!r}"


class UnknownActionError(KeyError):
    """
    No standard verb is defined for an action.
    """

    def __init__(self, action: str) -> None:
        super().__init__(action)
        self.action = action

    def __str__(self) -> str:
        return f"no standard verb for {self.action!r}"


class ConfigError(Exception):
    """
    Configuration specific errors.
    """

    pass
