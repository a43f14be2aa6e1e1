#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the adoctree library.

Parsing AsciiDoc text never raises: malformed markup degrades to literal text,
and unresolvable includes are logged and skipped. The exceptions below cover
the remaining failure modes, which are programming errors (wrong option
objects), unreadable top-level input files and unwritable render targets.

Exception Hierarchy
-------------------
- AdocTreeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, read failures)

  - FormatError (unknown output format)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class AdocTreeError(Exception):
    """Base exception class for all adoctree-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AdocTreeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(AdocTreeError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(AdocTreeError):
    """Exception raised when an unknown output format is requested.

    Parameters
    ----------
    format_type : str
        The requested format name
    supported_formats : list[str], optional
        Formats that are available

    """

    def __init__(
        self,
        format_type: str,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        message = f"Unsupported output format: '{format_type}'"
        if supported_formats:
            message += f". Supported formats: {', '.join(supported_formats)}"
        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class RenderingError(AdocTreeError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing rendered output fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "AdocTreeError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "FormatError",
    "RenderingError",
    "OutputWriteError",
]
