import os
from concurrent.futures import ThreadPoolExecutor

# Constants
POKEAPI_BASE = os.environ.get('POKEAPI_BASE', 'https://pokeapi.co/api/v2').rstrip('/')

# (connect, read) timeouts in seconds, passed straight to requests
CONNECT_TIMEOUT = float(os.environ.get('POKEAPI_CONNECT_TIMEOUT', '5'))
READ_TIMEOUT = float(os.environ.get('POKEAPI_READ_TIMEOUT', '5'))
HTTP_TIMEOUT = (CONNECT_TIMEOUT, READ_TIMEOUT)

# Highest National Dex id accepted by the search box
MAX_POKEMON_ID = 1025

# Characters rejected by the search box, checked in this order
INVALID_CHARS = '%&*(@)!;:<>'

MAX_WORKERS = int(os.environ.get('POKEDEX_MAX_WORKERS', '4'))

# Thread pool for lookups and image fetches (bounded to be polite to PokeAPI)
EXECUTOR = ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix='pokedex')
