from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamError(Exception):
    """Raised for any failure talking to the forecasting service."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class SolarApiClient:
    """Thin synchronous client for the upstream solar forecasting service.

    Every gateway route goes through ``send`` (one request, no retries) and,
    unless it needs the raw status code, through ``fetch`` which also checks
    for HTTP 200 and decodes the JSON body into a response model.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def url_for(self, path: str) -> str:
        return self.base_url + path

    def send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: Optional[dict[str, Any]] = None,
    ) -> requests.Response:
        url = self.url_for(path)
        logger.info("Forwarding %s %s", method, url)

        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if json is not None:
            kwargs["json"] = json
        if files is not None:
            kwargs["files"] = files

        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Upstream %s %s failed: %s", method, url, exc)
            raise UpstreamError(f"failed to send request: {exc}") from exc

    def fetch(
        self,
        method: str,
        path: str,
        model: Type[ModelT],
        *,
        json: Any = None,
        files: Optional[dict[str, Any]] = None,
        echo_body: bool = False,
    ) -> ModelT:
        response = self.send(method, path, json=json, files=files)

        if response.status_code != 200:
            message = f"unexpected status code: {response.status_code}"
            if echo_body:
                message += f", response: {response.text}"
            logger.warning("Upstream %s %s answered %s", method, path, response.status_code)
            raise UpstreamError(message, status_code=response.status_code)

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamError(f"failed to unmarshal response: {exc}") from exc

    def close(self) -> None:
        self.session.close()
