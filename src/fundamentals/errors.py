"""Base error types shared by the sub-packages."""


class SourceError(Exception):
    """An error pointing at a position in some parsed text.

    ``line`` and ``column`` are 1-based and None when the position is unknown.
    """

    def __init__(
        self, message: str, *, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    @property
    def location(self) -> str:
        """``line:column`` or an empty string."""
        if self.line is None:
            return ""
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"
