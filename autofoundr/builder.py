"""Storefront builder: proxy client and the page's state machine.

The Streamlit page (frontend/streamlit_app.py) only renders whatever state
`Builder` is in; every transition happens here so it can be exercised
without a browser.

States:
  - Idle: nothing shown, button enabled
  - Loading: request in flight, button disabled
  - ResultShown: last bundle on screen

A failed request fires one alert and lands back in Idle.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

import requests
from pydantic import ValidationError

from autofoundr.errors import GenerationError
from autofoundr.schemas import GenerateResponse

FAILURE_ALERT = "Failed to generate — check backend"

logger = logging.getLogger("autofoundr.builder")


class GenerationClient:
    def __init__(self, proxy_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.proxy_url = proxy_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, idea: str) -> GenerateResponse:
        """POST the idea to the proxy and return the validated bundle."""
        try:
            resp = self.session.post(self.proxy_url, json={"idea": idea}, timeout=self.timeout)
            resp.raise_for_status()
            return GenerateResponse.model_validate(resp.json())
        except (requests.exceptions.RequestException, ValueError, ValidationError) as e:
            raise GenerationError(str(e)) from e


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    idea: str


@dataclass(frozen=True)
class ResultShown:
    bundle: GenerateResponse


BuilderState = Union[Idle, Loading, ResultShown]


class Builder:
    def __init__(self, client: GenerationClient, alert: Callable[[str], None]):
        self.client = client
        self.alert = alert
        self.idea = ""
        self.state: BuilderState = Idle()

    @property
    def is_busy(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def bundle(self) -> Optional[GenerateResponse]:
        if isinstance(self.state, ResultShown):
            return self.state.bundle
        return None

    def submit(self, idea: str) -> BuilderState:
        # no client-side validation: empty ideas go through and the service picks the default
        self.idea = idea
        self.state = Loading(idea)
        try:
            bundle = self.client.generate(idea)
        except GenerationError as e:
            logger.error("generation failed: %s", e)
            self.state = Idle()
            self.alert(FAILURE_ALERT)
        else:
            self.state = ResultShown(bundle)
        return self.state

    def reset(self) -> BuilderState:
        self.idea = ""
        self.state = Idle()
        return self.state
