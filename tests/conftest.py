"""
Pytest configuration and fixtures
"""
import copy
import io

import pytest
import requests
from PIL import Image

from app import create_app
from services.core import POKEAPI_BASE

ARTWORK_URL = 'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/25.png'

PIKACHU = {
    'id': 25,
    'name': 'pikachu',
    'weight': 60,
    'height': 4,
    'base_experience': 112,
    'abilities': [
        {'ability': {'name': 'static', 'url': f'{POKEAPI_BASE}/ability/9/'}, 'is_hidden': False, 'slot': 1},
        {'ability': {'name': 'lightning-rod', 'url': f'{POKEAPI_BASE}/ability/31/'}, 'is_hidden': True, 'slot': 3},
    ],
    'moves': [
        {'move': {'name': 'mega-punch', 'url': f'{POKEAPI_BASE}/move/5/'}, 'version_group_details': []},
        {'move': {'name': 'pay-day', 'url': f'{POKEAPI_BASE}/move/6/'}, 'version_group_details': []},
    ],
    'sprites': {
        'front_default': 'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png',
        'other': {
            'official-artwork': {'front_default': ARTWORK_URL, 'front_shiny': None},
            'home': {'front_default': None},
        },
    },
}


def pokemon_doc(**overrides):
    """A deep copy of the Pikachu document with top-level keys replaced."""
    doc = copy.deepcopy(PIKACHU)
    doc.update(overrides)
    return doc


def png_bytes(size=(4, 4)):
    buf = io.BytesIO()
    Image.new('RGB', size, (255, 204, 0)).save(buf, format='PNG')
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, content=b'', headers=None):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.headers = headers or {}

    def json(self):
        if self._json is None:
            raise ValueError('No JSON object could be decoded')
        return self._json


class FakeHTTP:
    """Stands in for requests.get: maps URLs to canned responses or exceptions."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url, response):
        self.routes[url] = response

    def add_pokemon(self, identifier, doc=None, status_code=200):
        self.add(f'{POKEAPI_BASE}/pokemon/{identifier}', FakeResponse(status_code, doc))

    def __call__(self, url, timeout=None, **kwargs):
        self.calls.append((url, timeout))
        resp = self.routes.get(url)
        if resp is None:
            return FakeResponse(404, {'detail': 'Not found.'})
        if isinstance(resp, Exception):
            raise resp
        return resp


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr(requests, 'get', fake)
    return fake


@pytest.fixture
def app():
    return create_app({'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def state(app):
    return app.extensions['watchlist']
