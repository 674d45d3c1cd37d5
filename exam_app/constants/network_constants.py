"""Network configuration constants for the exam client."""

DEFAULT_API_URL: str = "http://localhost:3000/api"
DEFAULT_TIMEOUT_SECONDS: float = 10.0
DEMO_SERVER_HOST: str = "127.0.0.1"
DEMO_SERVER_PORT: int = 3000
DEMO_SERVER_API_PREFIX: str = "/api"
