# shipgrid/utils/errors.py
"""Error types and formatting utilities."""


class SimulationError(Exception):
    """Base class for errors raised by the resource simulation."""
    pass


class ScheduleError(SimulationError):
    """Supply/demand orders do not match the registered components.

    This is a construction-time defect, never a runtime condition, so it is
    not meant to be caught and retried.
    """
    pass


class LayoutError(SimulationError):
    """A component layout could not be loaded or built."""
    pass


def format_error(error_type, message, suggestion=None):
    """Render a failed driver run, e.g. a layout that did not build.

    ``suggestion`` goes on its own indented line under the error.
    """
    lines = [f"⚠ {error_type}: {message}"]
    if suggestion:
        lines.append(f"  → {suggestion}")
    return "\n".join(lines)


def format_success(message, details=None):
    """Render a finished run with one indented line per ``details`` entry.

    The driver passes ``LedgerRecorder.summary()`` here, so each line is a
    ledger quantity and its min/max/final values.
    """
    lines = [f"✓ {message}"]
    for key, value in (details or {}).items():
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def unknown_command_error(command_name, available_commands=None):
    """Build an error dict for a command a component does not handle."""
    message = f"Unknown command: '{command_name}'"
    result = error_dict("UNKNOWN_COMMAND", message)
    if available_commands:
        result["available"] = sorted(available_commands)
    return result


def success_dict(status, **fields):
    """Result of an operator command a component carried out.

    ``status`` names what happened (``"reactor_shutdown"``); ``fields`` add
    context such as the component name.
    """
    return {"ok": True, "status": status, **fields}


def error_dict(error_type, message, **fields):
    """Result of an operator command that was refused or could not be routed.

    ``error_type`` is a short code like ``UNKNOWN_COMPONENT`` or
    ``NOT_RUNNING``.
    """
    return {"ok": False, "error": error_type, "message": message, **fields}
