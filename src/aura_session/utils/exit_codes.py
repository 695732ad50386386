"""
Exit codes for the Aura Session CLI.

Semantic exit codes so scripts wrapping ``aura`` can tell a finished
session from an abandoned one or a bad invocation.
"""

# Success (session completed, or a non-session command ran)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Session ended before completion (quit or reset during lock-in)
SESSION_ABANDONED = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        SESSION_ABANDONED: "SESSION_ABANDONED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        SESSION_ABANDONED: "Session was left before all sprints finished",
    }
    return descriptions.get(code, "Unknown error")
