# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml)
