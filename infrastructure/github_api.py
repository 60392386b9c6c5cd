import time
import requests
from loguru import logger

from config.settings import GRAPHQL_URL, MAX_RETRIES, REQUEST_TIMEOUT
from core.errors import TransportError


def graphql_query(query, token, variables=None, url=GRAPHQL_URL, retries=MAX_RETRIES, timeout=REQUEST_TIMEOUT):
    """
    POST a GraphQL query and return the decoded reply.

    Connection failures and 5xx replies are retried with exponential backoff.
    Any other status is handed back as-is: GitHub reports bad credentials and
    query errors in the JSON body, and the caller validates it.
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github.v4+json"
    }
    last_error = None

    for attempt in range(retries):
        try:
            response = requests.post(url, json={"query": query, "variables": variables}, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            last_error = e
            logger.warning(f"Retry {attempt+1}/{retries} after request error: {e}")
            _backoff(attempt, retries)
            continue

        if response.status_code >= 500:
            last_error = None
            logger.warning(f"Retry {attempt+1}/{retries} after failure {response.status_code}")
            _backoff(attempt, retries)
            continue

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Could not decode GraphQL reply (HTTP {response.status_code})", e) from e

    raise TransportError(f"GraphQL query failed after {retries} attempts.", last_error)


def _backoff(attempt, retries):
    # no wait once the last attempt has failed
    if attempt < retries - 1:
        time.sleep(2 ** attempt)


class GraphQLClient:
    """Binds a bearer token to a single GraphQL endpoint."""

    def __init__(self, token, url=GRAPHQL_URL, retries=MAX_RETRIES, timeout=REQUEST_TIMEOUT):
        self.token = token
        self.url = url
        self.retries = retries
        self.timeout = timeout

    def execute(self, query_text):
        logger.debug(f"POST {self.url}")
        return graphql_query(query_text, self.token, url=self.url, retries=self.retries, timeout=self.timeout)
