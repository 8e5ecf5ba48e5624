"""
Execution context capture
Produces the opaque context blob attached to reports
"""
import inspect
import os
import sys
from typing import Any, Dict, Optional

_PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _relative_path(path: str) -> str:
    cwd = os.getcwd()
    if cwd and path.startswith(cwd):
        return "." + path[len(cwd):]
    return path


def capture_execution_context() -> Dict[str, Any]:
    """
    Describe the first caller outside the sqlguard package

    Returns:
        Dict with file, file_relative, line, function, url (None),
        method ("CLI") and script_name
    """
    stack = inspect.stack(context=0)
    caller: Optional[inspect.FrameInfo] = None
    try:
        for frame in stack[1:]:
            if not os.path.abspath(frame.filename).startswith(_PACKAGE_ROOT):
                caller = frame
                break
        if caller is None and len(stack) > 1:
            caller = stack[-1]

        context: Dict[str, Any] = {
            "file": caller.filename if caller else "unknown",
            "line": caller.lineno if caller else 0,
            "function": caller.function if caller else "unknown",
            "url": None,
            "method": "CLI",
            "script_name": sys.argv[0] if sys.argv and sys.argv[0] else None,
        }
    finally:
        del stack

    if context["file"] != "unknown":
        context["file_relative"] = _relative_path(context["file"])

    return context


def request_context(request) -> Dict[str, Any]:
    """
    Describe an incoming HTTP request (FastAPI/Starlette Request)
    """
    client = request.client.host if request.client else None
    return {
        "file": "unknown",
        "line": 0,
        "function": request.scope.get("endpoint").__name__ if request.scope.get("endpoint") else "unknown",
        "url": str(request.url),
        "method": request.method,
        "client": client,
        "script_name": None,
    }
