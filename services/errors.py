class PokedexError(Exception):
    """Base class for every failure a user action can surface."""


class ValidationError(PokedexError):
    """Search text rejected before any request is made."""

    def __init__(self, reason: str, code: str, character: str = None):
        super().__init__(reason)
        self.reason = reason
        self.code = code
        self.character = character


class PokemonLookupError(PokedexError):
    """A lookup against PokeAPI did not produce a record."""


class PokemonNotFoundError(PokemonLookupError):
    def __init__(self, identifier: str, status_code: int = None):
        msg = f"No Pokemon found for {identifier!r}"
        if status_code is not None:
            msg = f"{msg} (HTTP {status_code})"
        super().__init__(msg)
        self.identifier = identifier
        self.status_code = status_code


class TransportError(PokemonLookupError):
    def __init__(self, identifier: str, cause: Exception = None):
        super().__init__(f"Request for {identifier!r} failed: {cause}")
        self.identifier = identifier
        self.cause = cause


class MalformedDocumentError(PokemonLookupError):
    """The response body does not have the shape of a /pokemon document."""

    def __init__(self, field: str, detail: str = ''):
        msg = f"Malformed Pokemon document at {field!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.field = field


class ImageError(PokedexError):
    def __init__(self, url: str, detail: str = ''):
        super().__init__(f"Could not load image {url!r}: {detail}" if detail else f"Could not load image {url!r}")
        self.url = url
