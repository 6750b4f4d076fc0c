# Trace layout
TRACE_SEPARATOR = '-' * 40
ERROR_PREFIX = 'Error: '
INFO_PREFIX = 'Info: '
TRACE_INDENT = '\t'

# Source files
SOURCE_ENCODING = 'utf-8'

# CLI exit codes
EXIT_COMPILED = 0
EXIT_ERRORS = 1
EXIT_EXEC_ERROR = 100
