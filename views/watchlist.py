import logging

from flask import Blueprint, Response, current_app, jsonify, render_template, request

from services.errors import (
    ImageError,
    MalformedDocumentError,
    PokemonNotFoundError,
    TransportError,
    ValidationError,
)
from services.media import placeholder_image, submit_image
from services.pokemon import submit_lookup
from services.text_utils import capitalize_words
from services.validation import ensure_valid

bp = Blueprint('watchlist', __name__)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Pokemon not found'
DUPLICATE_MESSAGE = 'Pokemon already in watchlist'
FETCH_ERROR_MESSAGE = 'Error fetching Pokemon data'


def _state():
    return current_app.extensions['watchlist']


def _pokemon_json(record):
    return record.to_dict() if record is not None else None


@bp.route('/')
def index():
    entries, profile = _state().snapshot()
    return render_template(
        'watchlist.html',
        active_page='watchlist',
        entries=entries,
        profile=profile,
    )


@bp.route('/api/watchlist', methods=['GET'])
def list_entries():
    entries, _ = _state().snapshot()
    return jsonify({'entries': [e.to_dict() for e in entries]})


@bp.route('/api/watchlist', methods=['POST'])
def add_entry():
    data = request.get_json(silent=True) or {}
    # A JSON array or string body carries no identifier
    if not isinstance(data, dict):
        data = {}
    identifier = data.get('identifier')
    if identifier is None:
        identifier = request.form.get('identifier', '')
    if not isinstance(identifier, str):
        identifier = str(identifier)
    try:
        identifier = ensure_valid(identifier)
    except ValidationError as e:
        return jsonify({'error': e.reason, 'code': e.code, 'character': e.character}), 400

    # The lookup runs on the pool; this request waits for it and applies the result itself
    future = submit_lookup(identifier, current_app.config.get('POKEAPI_TIMEOUT'))
    try:
        record = future.result()
    except PokemonNotFoundError:
        return jsonify({'error': NOT_FOUND_MESSAGE}), 404
    except (TransportError, MalformedDocumentError) as e:
        logger.warning("Lookup for %r failed: %s", identifier, e)
        return jsonify({'error': FETCH_ERROR_MESSAGE}), 502

    state = _state()
    if not state.apply_lookup(record):
        return jsonify({'error': DUPLICATE_MESSAGE, 'pokemon': _pokemon_json(record)}), 409
    return jsonify({
        'message': f"Added {capitalize_words(record.name)} to watchlist",
        'pokemon': _pokemon_json(record),
    }), 201


@bp.route('/api/watchlist', methods=['DELETE'])
def clear_entries():
    _state().clear_all()
    return jsonify({'message': 'All Pokemon removed from watchlist', 'entries': []})


@bp.route('/api/watchlist/<int:position>')
def select_entry(position):
    try:
        record = _state().select(position)
    except IndexError:
        return jsonify({'error': 'No watchlist entry at that position'}), 404
    return jsonify({'pokemon': _pokemon_json(record)})


@bp.route('/api/profile', methods=['GET'])
def get_profile():
    _, profile = _state().snapshot()
    return jsonify({'pokemon': _pokemon_json(profile)})


@bp.route('/api/profile', methods=['DELETE'])
def clear_profile():
    _state().clear_profile()
    return jsonify({'message': 'Profile cleared', 'pokemon': None})


@bp.route('/api/profile/image')
def profile_image():
    _, profile = _state().snapshot()
    if profile is None:
        return jsonify({'error': 'No Pokemon selected'}), 404
    placeholder = False
    try:
        data, mimetype = submit_image(profile.image_url, current_app.config.get('POKEAPI_TIMEOUT')).result()
    except ImageError as e:
        logger.debug("Falling back to placeholder: %s", e)
        data, mimetype = placeholder_image()
        placeholder = True
    resp = Response(data, mimetype=mimetype)
    resp.headers['Cache-Control'] = 'no-store'
    if placeholder:
        resp.headers['X-Image-Placeholder'] = '1'
    return resp
