"""Manages HTTP sessions backing the pipeline transports."""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP request sessions for benchmark connections."""

    @staticmethod
    def create_pipeline_session(pipeline: int) -> requests.Session:
        """
        Create a session holding at most ``pipeline`` connections to one target.

        Retries are disabled: every attempt is measured and classified once.
        The pool blocks instead of opening extra connections past ``pipeline``.
        """
        session = requests.Session()
        # read=False re-raises read timeouts as-is so requests reports ReadTimeout
        retry = Retry(total=0, connect=0, read=False, redirect=0, status=0, raise_on_status=False)
        adapter = HTTPAdapter(
            pool_connections=1,
            pool_maxsize=pipeline,
            pool_block=True,
            max_retries=retry,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        logger.debug(f"Created session with a pool of {pipeline} connection(s)")
        return session
