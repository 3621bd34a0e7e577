from urllib.parse import quote


def normalize_identifier(s: str) -> str:
    """Trim and lowercase a search term so it can be used as a PokeAPI path segment."""
    if not isinstance(s, str):
        s = str(s)
    return s.strip().lower()


def is_dot_segment(s: str) -> bool:
    """True for ".", ".." and longer runs of dots; URL normalization collapses those out of the path."""
    s = normalize_identifier(s)
    return bool(s) and not s.strip('.')


def identifier_path_segment(s: str) -> str:
    # Names never contain '/', but keep whatever the user typed inside one segment
    return quote(normalize_identifier(s), safe='')


def capitalize_first(s: str) -> str:
    if not s:
        return s
    return s[:1].upper() + s[1:]


def capitalize_words(s: str) -> str:
    """Upper-case the first letter of each space separated word, dropping extra spaces."""
    if not s:
        return s
    return ' '.join(capitalize_first(w) for w in s.split(' ') if w)


def slug_to_title(slug: str) -> str:
    # "lightning-rod" -> "Lightning Rod"
    return capitalize_words((slug or '').replace('-', ' '))
