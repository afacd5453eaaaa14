class DecodeError(Exception):
    """Base class for failures while decompressing a 12-bit LZW stream."""
    def __init__(self, message="Decoding failed"):
        super().__init__(message)


class UsageError(DecodeError):
    """Raised when the command line does not name exactly one file."""
    def __init__(self, message="Requires a target file"):
        super().__init__(message)


class FileOpenError(DecodeError):
    """Raised when the compressed file cannot be opened."""
    def __init__(self, filename, reason=None):
        self.filename = filename
        message = f"No such file: {filename}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TruncatedInputError(DecodeError):
    """Raised when trailing bytes could not form a complete codeword."""
    def __init__(self, dropped=1):
        self.dropped = dropped
        super().__init__(f"Input truncated: {dropped} trailing byte(s) discarded")


class CorruptStreamError(DecodeError):
    """Raised when the codeword stream cannot be decoded."""
    def __init__(self, message="Corrupt codeword stream"):
        super().__init__(message)


class UnknownCodeError(CorruptStreamError):
    """Raised when a codeword is neither defined nor the next code to assign."""
    def __init__(self, code, next_code):
        from .core import format_bits
        self.code = code
        self.next_code = next_code
        message = (
            f"Unknown code {int(code)} ({format_bits(int(code))}), "
            f"next code {next_code}"
        )
        super().__init__(message)
