"""Personal nouns ("the <noun> of ..."), made of a stem and a role."""

from typing import Final

_STEMS: Final = (
    "ash", "bane", "bear", "bell", "birch", "black", "blade", "blood",
    "bone", "book", "bow", "brass", "brave", "bright", "brook", "cask",
    "cave", "chain", "cinder", "clay", "cloud", "coal", "coin", "copper",
    "coral", "crow", "crown", "dawn", "deep", "deer", "dew", "dream",
    "drift", "dusk", "dust", "earth", "elm", "ember", "fair", "fang",
    "far", "feather", "fen", "fern", "field", "fire", "flame", "flint",
    "fog", "foot", "forge", "fox", "frost", "gale", "ghost", "glass",
    "gold", "grain", "grass", "grave", "green", "grey", "hail", "hammer",
    "harbor", "hawk", "hazel", "heart", "hearth", "hill", "holly", "honey",
    "horn", "ice", "ink", "iron", "ivy", "jade", "kettle", "lake",
    "lamp", "leaf", "light", "lion", "marsh", "mist", "moon", "moss",
    "night", "oak", "ocean", "owl", "pine", "rain", "raven", "red",
    "reed", "river", "rock", "rose", "rune", "salt", "sand", "sea",
    "shadow", "shell", "silver", "sky", "slate", "smoke", "snow", "song",
    "spark", "spring", "star", "steel", "stone", "storm", "sun", "thorn",
    "thunder", "tide", "timber", "tower", "vine", "wave", "whisper", "wolf",
)
_ROLES: Final = (
    "keeper", "smith", "walker", "rider", "singer", "weaver", "hunter", "warden",
    "seeker", "binder", "breaker", "caller", "carver", "catcher", "chaser", "crafter",
    "dancer", "diver", "dreamer", "drinker", "eater", "finder", "forger", "gazer",
    "giver", "guard", "herald", "herder", "holder", "jumper", "knight", "maker",
    "mender", "minder", "monger", "painter", "picker", "player", "reader", "reaver",
    "runner", "sayer", "shaper", "sower", "speaker", "spinner", "stalker", "swimmer",
    "taker", "tamer", "teller", "tender", "thief", "trader", "wanderer", "watcher",
    "wielder", "worker", "wright", "bringer", "slayer", "lover", "scout", "master",
)

WORDS: Final[tuple[str, ...]] = tuple(
    f"{stem}{role}" for stem in _STEMS for role in _ROLES
)
