from typing import Any, Optional


# -----------------------------------------------------------------------------


class RuntimeKitError(Exception):
    """ Common root of every error raised by the library.

        Each concrete error also derives from the closest builtin exception,
        so callers may catch either `IndexOutOfRange` or plain `IndexError`.
    """


class IndexOutOfRange(RuntimeKitError, IndexError):
    def __init__(self, index: 'int', size: 'int', description: 'str' = "index out of range") -> 'None':
        super().__init__(f"{description}: {index} (size {size})")
        self.index, self.size = index, size


class EmptyContainerError(RuntimeKitError, LookupError):
    def __init__(self, container: 'str') -> 'None':
        super().__init__(f"{container} is empty")
        self.container = container


class InvalidArgument(RuntimeKitError, ValueError):
    pass


class StaleNodeError(InvalidArgument):
    """ Raised when a linked list node handle is used after its node
        has been removed from the list (or the list has been cleared).
    """


class DuplicateKeyError(InvalidArgument):
    def __init__(self, key: 'Any') -> 'None':
        super().__init__(f"key {key!r} already exists")
        self.key = key


class KeyNotFoundError(RuntimeKitError, KeyError):
    def __init__(self, key: 'Any') -> 'None':
        super().__init__(key)
        self.key = key

    def __str__(self) -> 'str':
        return f"key {self.key!r} was not found"


class ArithmeticOverflow(RuntimeKitError, OverflowError):
    pass


class ArithmeticUnderflow(RuntimeKitError, ArithmeticError):
    pass


# -----------------------------------------------------------------------------


class IOFailure(RuntimeKitError, OSError):
    """ Failure reported by the filesystem or a stream.

        `path` is the file the failure relates to (if any); the message is
        the one reported by the operating system whenever one was available.
    """

    def __init__(self, message: 'str', path: 'Optional[str]' = None) -> 'None':
        super().__init__(message)
        self.message, self.path = message, path

    def __str__(self) -> 'str':
        return self.message if self.path is None else f"{self.message}: '{self.path}'"


class FileNotFound(IOFailure):
    pass


class DirectoryNotFound(IOFailure):
    pass


class UnauthorizedAccess(IOFailure):
    pass


class UnsupportedOperation(IOFailure):
    pass
