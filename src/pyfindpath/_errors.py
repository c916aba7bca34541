"""Exception hierarchy for path finding."""


class FindPathError(Exception):
    """Base exception for pyfindpath.

    ``str(err)`` is a fixed, short category such as ``"invalid path
    expression"`` that callers can match on. ``internal()`` carries the
    offending input and, for parse failures, the lark diagnostic; the lark
    exception itself is kept on ``wrapped``.
    """

    def __init__(
        self,
        message: str,
        detail: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.wrapped = wrapped

    def internal(self) -> str:
        """Return the detailed diagnostic, or the short message if none was given."""
        return self.detail or self.message


class InvalidPathError(FindPathError):
    """Raised when a path string or step is malformed."""


class InvalidArgumentsError(FindPathError):
    """Raised when arguments to an entry point are invalid."""


# User-facing error message constants
ERR_MSG_INVALID_PATH = "invalid path expression"
ERR_MSG_INVALID_INDEX = "invalid index step"
ERR_MSG_INVALID_KEY = "invalid key step"
ERR_MSG_NOT_CALLABLE = "predicate must be callable"
ERR_MSG_NOT_NUMERIC = "numeric target required"
