# -*- coding: utf-8 -*-
"""
Bounded HTTP call - one timeout-limited request to the storefront API.

Shared by the catalog provider, the quote submission gateway and the
quote status service so that timeout handling and error mapping live in
one place. No retries are issued.

The time budget covers the whole exchange (connect, headers and body).
requests only bounds each socket operation, so the exchange runs on a
worker thread and the caller waits on it with the overall deadline.
"""

import json
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, Optional, Tuple

import requests

from services.exceptions import ApiException, NetworkException, RequestTimeoutException
from utils.logger import get_logger

logger = get_logger(__name__)

# Longest body logged in full
_MAX_LOGGED_BODY = 1000

_CHUNK_SIZE = 8192


class BoundedHttpCall:
    """
    Issues single JSON requests bounded by a timeout.

    Usage:
        call = BoundedHttpCall("http://localhost:3005/v1/api", timeout=15)
        envelope = call.request("POST", "/quotes/request", json_data=body)
    """

    def __init__(self, base_url: str, timeout: float,
                 session: Optional[requests.Session] = None):
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Execute an HTTP request with error mapping.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/quotes/request")
            json_data: JSON payload
            params: Query parameters
            timeout: Override of the default time budget, in seconds

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ApiException: non-2xx status or undecodable body
            RequestTimeoutException: time budget exceeded
            NetworkException: connection or other transport failure
        """
        url = f"{self.base_url}{endpoint}"
        budget = timeout or self.timeout

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        deadline = time.monotonic() + budget
        in_flight: Dict[str, requests.Response] = {}
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bounded-http")
        try:
            future = executor.submit(
                self._exchange, method, url, json_data, params, budget, deadline, in_flight
            )
            response, body = future.result(timeout=budget)
            response.raise_for_status()
        except FutureTimeoutError as e:
            # Closing the response unblocks a worker stuck reading the body
            if "response" in in_flight:
                in_flight["response"].close()
            raise self._timeout(method, endpoint, budget, e) from e
        except RequestTimeoutException:
            logger.error(f"Timeout after {budget}s: {method} {endpoint}")
            raise
        except requests.exceptions.HTTPError as e:
            status_code = response.status_code
            response_data = self._decode_error_body(response, body)
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            message = response_data.get("message") or f"HTTP error! status: {status_code}"
            raise ApiException(
                message=message,
                status_code=status_code,
                response_data=response_data
            ) from e
        except requests.exceptions.Timeout as e:
            raise self._timeout(method, endpoint, budget, e) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            ) from e
        finally:
            executor.shutdown(wait=False)

        if not body:
            logger.info(f"[API RES] {response.status_code} {endpoint} (empty)")
            return None

        try:
            result = json.loads(self._text(response, body))
        except ValueError as e:
            logger.error(f"[API ERR] {response.status_code} {endpoint} | Invalid JSON body")
            raise ApiException(
                message="Invalid JSON in response",
                status_code=response.status_code
            ) from e

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        text = json.dumps(result, ensure_ascii=False, default=str)
        if len(text) > _MAX_LOGGED_BODY:
            logger.debug(f"[API RES] Body (truncated): {text[:_MAX_LOGGED_BODY]}...")
        else:
            logger.debug(f"[API RES] Body: {text}")
        return result

    def _exchange(self, method: str, url: str, json_data: Optional[Dict],
                  params: Optional[Dict], budget: float, deadline: float,
                  in_flight: Dict[str, requests.Response]) -> Tuple[requests.Response, bytes]:
        """Send the request and read the whole body, giving up at the deadline."""
        response = self.session.request(
            method=method,
            url=url,
            json=json_data,
            params=params,
            headers=self._headers(),
            timeout=budget,
            stream=True,
        )
        in_flight["response"] = response
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise RequestTimeoutException(
                        message=f"Request timed out after {budget} seconds",
                        timeout=budget
                    )
        finally:
            response.close()
        return response, b"".join(chunks)

    @staticmethod
    def _timeout(method: str, endpoint: str, budget: float,
                 error: Exception) -> RequestTimeoutException:
        logger.error(f"Timeout after {budget}s: {method} {endpoint}")
        return RequestTimeoutException(
            message=f"Request timed out after {budget} seconds",
            timeout=budget,
            original_error=error
        )

    @staticmethod
    def _text(response: requests.Response, body: bytes) -> str:
        return body.decode(response.encoding or "utf-8", errors="replace")

    def _decode_error_body(self, response: requests.Response, body: bytes) -> Dict:
        try:
            data = json.loads(self._text(response, body)) if body else {}
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {"data": data}
        return data
