import logging

import requests

from .core import EXECUTOR, HTTP_TIMEOUT, POKEAPI_BASE
from .errors import MalformedDocumentError, PokemonNotFoundError, TransportError
from .records import PokemonRecord
from .text_utils import identifier_path_segment, is_dot_segment, normalize_identifier

logger = logging.getLogger(__name__)


def pokemon_url(identifier: str) -> str:
    # "." or ".." would be resolved away and hit /pokemon/ or the API root instead
    if is_dot_segment(identifier):
        raise PokemonNotFoundError(normalize_identifier(identifier))
    return f"{POKEAPI_BASE}/pokemon/{identifier_path_segment(identifier)}"


def fetch_by_identifier(identifier: str, timeout=None) -> dict:
    """GET /pokemon/<identifier> once and return the decoded JSON document.
    Raises PokemonNotFoundError for any non-200 status or a dots-only
    identifier, TransportError when the request itself fails (DNS, refused
    connection, timeout) and
    MalformedDocumentError when a 200 body is not a JSON object.
    No retries: the timeouts are the only bound on how long this blocks.
    """
    ident = normalize_identifier(identifier)
    url = pokemon_url(ident)
    try:
        r = requests.get(url, timeout=timeout or HTTP_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("Lookup for %r failed: %s", ident, e)
        raise TransportError(ident, e) from e
    if r.status_code != 200:
        logger.warning("Lookup for %r returned HTTP %s", ident, r.status_code)
        raise PokemonNotFoundError(ident, r.status_code)
    try:
        j = r.json()
    except ValueError as e:
        raise MalformedDocumentError('<body>', 'response is not JSON') from e
    if not isinstance(j, dict):
        raise MalformedDocumentError('<body>', 'expected a JSON object')
    return j


def _require(doc, key, kind, path=None):
    path = path or key
    if not isinstance(doc, dict) or key not in doc:
        raise MalformedDocumentError(path, 'missing')
    value = doc[key]
    # bool is an int subclass; a JSON true is not a weight
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise MalformedDocumentError(path, f'expected {kind.__name__}, got {type(value).__name__}')
    return value


def _first_name(doc: dict, list_key: str, item_key: str) -> str:
    """Name of the first entry of e.g. abilities[0].ability.name, '' for an empty list.
    The list itself must be present.
    """
    entries = _require(doc, list_key, list)
    if not entries:
        return ''
    path = f'{list_key}[0].{item_key}'
    inner = _require(entries[0], item_key, dict, path)
    return _require(inner, 'name', str, f'{path}.name')


def _artwork_url(doc: dict) -> str:
    sprites = _require(doc, 'sprites', dict)
    other = _require(sprites, 'other', dict, 'sprites.other')
    art = _require(other, 'official-artwork', dict, 'sprites.other.official-artwork')
    if 'front_default' not in art:
        raise MalformedDocumentError('sprites.other.official-artwork.front_default', 'missing')
    url = art['front_default']
    # Some forms have no artwork: keep the record and let the image fall back to the placeholder
    if url is None:
        return ''
    if not isinstance(url, str):
        raise MalformedDocumentError('sprites.other.official-artwork.front_default', 'expected str')
    return url


def parse_pokemon(document: dict) -> PokemonRecord:
    """Build a PokemonRecord from a /pokemon document, all or nothing."""
    if not isinstance(document, dict):
        raise MalformedDocumentError('<body>', 'expected a JSON object')
    pid = _require(document, 'id', int)
    if pid < 0:
        raise MalformedDocumentError('id', 'negative id')
    name = _require(document, 'name', str)
    if not name:
        raise MalformedDocumentError('name', 'empty name')
    weight = _require(document, 'weight', int)
    height = _require(document, 'height', int)

    base_xp = document.get('base_experience')
    if base_xp is None:
        base_xp = 0
    elif isinstance(base_xp, bool) or not isinstance(base_xp, int):
        raise MalformedDocumentError('base_experience', f'expected int, got {type(base_xp).__name__}')

    ability = _first_name(document, 'abilities', 'ability')
    move = _first_name(document, 'moves', 'move')
    image_url = _artwork_url(document)

    return PokemonRecord(
        id=pid,
        name=name,
        weight=weight,
        height=height,
        base_experience=base_xp,
        ability=ability,
        move=move,
        image_url=image_url,
    )


def lookup(identifier: str, timeout=None) -> PokemonRecord:
    record = parse_pokemon(fetch_by_identifier(identifier, timeout=timeout))
    logger.info("Fetched %s for %r", record.label, normalize_identifier(identifier))
    return record


def submit_lookup(identifier: str, timeout=None):
    """Run lookup() on the shared pool. The returned Future holds a PokemonRecord
    or raises one of the PokemonLookupError subclasses from result().
    """
    return EXECUTOR.submit(lookup, identifier, timeout)
