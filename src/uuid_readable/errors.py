"""Custom exception hierarchy for uuid-readable encoding and decoding errors."""


class ReadableError(Exception):
    """Base exception for all recoverable uuid-readable errors."""


class DecodeError(ReadableError):
    """Raised when a sentence cannot be turned back into a token."""


class SentenceLengthError(DecodeError):
    """Raised when a sentence has fewer tokens than its profile template."""

    def __init__(self, message: str, *, expected: int, got: int) -> None:
        super().__init__(f"{message} (expected at least: {expected}) (got {got})")
        self.expected = expected
        self.got = got


class WordNotFoundError(DecodeError):
    """Raised when a word is missing from the category it should belong to."""

    def __init__(
        self,
        message: str,
        *,
        category: str,
        word: str,
        position: int | None = None,
    ) -> None:
        """
        Initialize with the failing category and word.

        :param message: Error message.
        :param category: Name of the category that was searched.
        :param word: The word that could not be resolved.
        :param position: Index of the word in the sentence, when known.
        """
        extra = f" (category: {category}) (word: {word!r}) "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.category = category
        self.word = word
        self.position = position


class NumeralError(DecodeError):
    """Raised when the numeric slot is not a decimal that fits its width."""

    def __init__(self, message: str, *, token: str, width: int, position: int) -> None:
        super().__init__(
            f"{message} (token: {token!r}) (max: {(1 << width) - 1}) (position: {position})"
        )
        self.token = token
        self.width = width
        self.position = position


class ConnectiveError(DecodeError):
    """Raised in strict mode when a connective word differs from the template."""

    def __init__(self, message: str, *, expected: str, got: str, position: int) -> None:
        super().__init__(
            f"{message} (expected: {expected!r}) (got {got!r}) (position: {position})"
        )
        self.expected = expected
        self.got = got
        self.position = position


class ProfileError(ReadableError):
    """Raised when a profile is unknown or cannot serve the requested operation."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


class CategoryError(ReadableError):
    """Raised when a word category name is unknown."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


class WordListError(ReadableError):
    """Raised when a word list breaks the duplicate-free, single-token rules."""

    def __init__(self, message: str, *, category: str, words: list[str]) -> None:
        shown = ", ".join(repr(w) for w in words[:5])
        if len(words) > 5:
            shown += f", ... ({len(words)} total)"
        super().__init__(f"{message} (category: {category}) (words: {shown})")
        self.category = category
        self.words = words


class TokenError(ReadableError):
    """Raised when a caller-supplied token is not a 128-bit UUID."""

    def __init__(self, message: str, *, token: object | None = None) -> None:
        extra = " "
        if token is not None:
            extra += f"(got {token!r}) "
        super().__init__(message + extra)
        self.token = token


class ContractViolation(AssertionError):
    """
    Raised when internal data breaks an invariant the codec relies on.

    Only an inconsistent profile or word list can trigger this, never user
    input. It is not a ``ReadableError`` and is never caught by the codec.
    """
