"""Exit inspection of terminated transport output."""

from .exit_inspector import JSON_ERROR, STATUS_LINE, ExitInspector, find_json_error, find_status_line

__all__ = ["ExitInspector", "STATUS_LINE", "JSON_ERROR", "find_status_line", "find_json_error"]
