"""
Tool Errors

Every failure a tool call can surface. Codes follow JSON-RPC 2.0 so the
stdio server can hand them to the client unchanged.
"""

INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class ToolError(Exception):
    """Base class for failures surfaced to the caller."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(ToolError):
    """Missing or non-string `text` argument."""

    code = INVALID_PARAMS

    def __init__(self, message: str = "Text parameter is required and must be a string"):
        super().__init__(message)


class MethodNotFoundError(ToolError):
    code = METHOD_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InternalError(ToolError):
    """Unexpected failure while running a tool, wrapping the original exception."""

    code = INTERNAL_ERROR

    def __init__(self, original: BaseException):
        super().__init__(f"Error analyzing text: {original}")
        self.original = original
