"""Shared fixtures: a small country payload and a fake HTTP layer."""

import json

import pytest
import requests

from src.core.models import parse_countries


SAMPLE_PAYLOAD = [
    {
        "name": {"common": "Germany", "official": "Federal Republic of Germany"},
        "capital": ["Berlin"],
        "population": 83240525,
        "region": "Europe",
    },
    {
        "name": {"common": "France", "official": "French Republic"},
        "capital": ["Paris"],
        "population": 67391582,
        "region": "Europe",
    },
    {
        "name": {"common": "South Africa", "official": "Republic of South Africa"},
        "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
        "population": 59308690,
        "region": "Africa",
    },
    {
        "name": {"common": "Antarctica", "official": "Antarctica"},
        "population": 1000,
        "region": "Antarctic",
    },
    {
        "name": {"common": "Bouvet Island", "official": "Bouvet Island"},
        "capital": [],
    },
]


class FakeResponse:
    """Stands in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url")

    def json(self):
        return json.loads(self.text)


@pytest.fixture
def sample_payload():
    return json.loads(json.dumps(SAMPLE_PAYLOAD))


@pytest.fixture
def countries(sample_payload):
    return parse_countries(sample_payload)


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; returns a recorder whose .response is served."""

    class Recorder:
        def __init__(self):
            self.calls = []
            self.response = FakeResponse(SAMPLE_PAYLOAD)
            self.error = None

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    recorder = Recorder()
    monkeypatch.setattr("src.data.fetcher.requests.get", recorder)
    return recorder
