"""Default configuration constants for the realmsandbox client."""

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# Extra attempts after the first one; every failure is retried the same way
DEFAULT_MAX_RETRIES = 2

# Path prefix all resource paths are built from
DEFAULT_BASE_PATH = "/"

# The only message callers ever see for a failed request
DEFAULT_ERROR_MESSAGE = "Something bad happened; please try again later."
