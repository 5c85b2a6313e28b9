# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_DATAERR = 65  # Input data was invalid (malformed markup, nothing matched)
EXIT_NOINPUT = 66  # Input file not found or unreadable
EXIT_CONFIG = 78  # Invalid configuration (bad template file)
