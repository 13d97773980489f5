"""Shared fixtures: a substitutable transport so no test touches the network."""

from typing import List, Optional
from urllib.parse import parse_qsl, urlsplit

import pytest

from openf1_client.client import OpenF1Client
from openf1_client.conf.settings import Settings

BASE_URL = "https://api.openf1.org/v1"


class FakeFetcher:
    """Records requested URLs and answers with a canned body or error."""

    def __init__(self, body: bytes = b"[]", error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.urls: List[str] = []

    def __call__(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body

    @property
    def last_url(self) -> str:
        return self.urls[-1]

    @property
    def last_path(self) -> str:
        return urlsplit(self.last_url).path

    @property
    def last_query(self) -> str:
        return urlsplit(self.last_url).query

    @property
    def last_pairs(self) -> list:
        return parse_qsl(self.last_query)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(base_url=BASE_URL, timeout=2.0)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def client(test_settings, fetcher) -> OpenF1Client:
    return OpenF1Client(settings=test_settings, fetcher=fetcher)
