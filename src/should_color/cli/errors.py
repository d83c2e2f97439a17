# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_USAGE = 2  # Command line usage error (click's own convention)
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad [tool.should-color] table)
