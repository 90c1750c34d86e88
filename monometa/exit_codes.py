"""Process exit codes shared by the CLI and command handlers."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERNAL_ERROR = 3
