"""HTTP client for the watering API, plus a small command line front end."""

import argparse
import logging
import sys
from typing import Dict, Optional

import requests

from common.config import get_config

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"


class PumpClientError(Exception):
    """Non-2xx response or transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message, self.status_code = message, status_code


class PumpClient:
    """Calls /status and /water with the shared API key."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Dict:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(
                method, url, headers={API_KEY_HEADER: self.api_key}, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.RequestException as e:
            raise PumpClientError(f"Connection failed: {e}")

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and "error" in body:
                message = str(body["error"])
            else:
                message = response.text or response.reason
            raise PumpClientError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError:
            raise PumpClientError(f"Invalid JSON response from {url}", status_code=response.status_code)

    def get_status(self) -> Dict:
        """GET /status."""
        return self._request("GET", "/status")

    def start_watering(self) -> Dict:
        """POST /water; blocks until the run (and any queued run ahead of it) finishes."""
        return self._request("POST", "/water", json={"action": "start"})


def main(argv=None) -> int:
    config = get_config()
    parser = argparse.ArgumentParser(description="Watering server client")
    parser.add_argument("command", choices=["status", "water"])
    parser.add_argument("--url", default=config.api_base_url, help="Server base URL")
    parser.add_argument("--api-key", default=None, help="API key (default: API_SECRET_KEY)")
    args = parser.parse_args(argv)

    api_key = args.api_key
    if not api_key:
        try:
            api_key = config.api_secret_key
        except ValueError as e:
            print(f"✗ {e}: pass --api-key or set it in .env")
            return 1

    client = PumpClient(args.url, api_key)
    try:
        if args.command == "status":
            data = client.get_status()
            print(f"✓ {data['message']}: {data['server_mode']} (pin {data['controlled_pin']})")
        else:
            print("Requesting watering...")
            data = client.start_watering()
            print(f"✓ {data['message']}")
            print(f"  {data['gpio_result']}")
    except PumpClientError as e:
        if e.status_code == 401:
            print("✗ Authentication failed: wrong API key")
        else:
            print(f"✗ {e.message}" + (f" (HTTP {e.status_code})" if e.status_code else ""))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
