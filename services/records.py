from dataclasses import asdict, dataclass

from .text_utils import capitalize_first, capitalize_words, slug_to_title


@dataclass(frozen=True)
class PokemonRecord:
    """The handful of /pokemon fields shown on a profile.
    weight is in hectograms and height in decimeters, as PokeAPI returns them.
    """
    id: int
    name: str
    weight: int
    height: int
    base_experience: int = 0
    ability: str = ''
    move: str = ''
    image_url: str = ''

    @property
    def label(self) -> str:
        # Watchlist row text, e.g. "#25 - Pikachu"
        return f"#{self.id} - {capitalize_first(self.name)}"

    def profile(self) -> dict:
        return {
            'name': f"Name: {capitalize_words(self.name)}",
            'id': f"Pokedex ID: #{self.id}",
            'weight': f"Weight: {self.weight} hectograms",
            'height': f"Height: {self.height} decimeters",
            'base_experience': f"Base XP: {self.base_experience}",
            'ability': f"Ability: {slug_to_title(self.ability)}",
            'move': f"Move: {slug_to_title(self.move)}",
        }

    def to_dict(self) -> dict:
        d = asdict(self)
        d['label'] = self.label
        d['profile'] = self.profile()
        return d

    def __str__(self):
        return self.label
