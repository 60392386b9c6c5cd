import os
from dotenv import load_dotenv

load_dotenv()


def _number(name, default, cast):
    value = os.getenv(name, default)
    try:
        return cast(value)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {value!r}.") from None


GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
GRAPHQL_URL = os.getenv("GITHUB_GRAPHQL_URL", "https://api.github.com/graphql")
REQUEST_TIMEOUT = _number("REQUEST_TIMEOUT", "30", float)
MAX_RETRIES = _number("MAX_RETRIES", "3", int)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def require_token() -> str:
    if not GITHUB_TOKEN:
        raise EnvironmentError("Please set GITHUB_TOKEN in your environment.")
    return GITHUB_TOKEN
