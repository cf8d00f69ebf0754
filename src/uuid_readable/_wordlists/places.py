"""Place names ("the ... of <place>"), made of a prefix and a suffix."""

from typing import Final

_PREFIXES: Final = (
    "Ash", "Bal", "Bar", "Bel", "Ber", "Black", "Bram", "Bri",
    "Brook", "Burn", "Cam", "Car", "Castle", "Cold", "Corn", "Cran",
    "Dal", "Dar", "Deer", "Dun", "East", "Eden", "Elm", "Ever",
    "Fair", "Fal", "Fern", "Fox", "Glen", "Gold", "Gran", "Green",
    "Hal", "Ham", "Har", "Hart", "Hawk", "Hay", "Heath", "High",
    "Hol", "Horn", "Hun", "Iron", "Ivy", "Kel", "Ken", "Kil",
    "King", "Lake", "Lan", "Lang", "Lee", "Lin", "Lock", "Long",
    "Low", "Lyn", "Mal", "Man", "Mar", "Mel", "Mid", "Mill",
    "Mor", "Moss", "New", "Nor", "North", "Oak", "Old", "Orm",
    "Pen", "Pine", "Port", "Quin", "Ram", "Raven", "Red", "Ren",
    "Rich", "Ring", "Rock", "Rose", "Row", "Rye", "Salt", "Sand",
    "Scar", "Sea", "Shel", "Silver", "South", "Stan", "Star", "Stone",
    "Storm", "Strat", "Sum", "Sun", "Swan", "Tal", "Tam", "Thorn",
    "Tor", "Tre", "Tun", "Ul", "Up", "Val", "Ven", "Wal",
    "War", "Wat", "Wel", "West", "Whit", "Wil", "Win", "Wolf",
    "Wor", "Wren", "Wy", "Yar", "Yew", "York", "Zel", "Zen",
)
_SUFFIXES: Final = (
    "bridge", "brook", "burg", "bury", "by", "castle", "cliff", "combe",
    "cott", "croft", "dale", "dell", "den", "don", "dore", "fell",
    "field", "fold", "ford", "gate", "glen", "grove", "ham", "haven",
    "hill", "holm", "holt", "hurst", "keep", "land", "leigh", "ley",
    "lin", "low", "marsh", "mead", "mere", "mont", "moor", "mouth",
    "ness", "point", "pool", "port", "ridge", "rock", "shaw", "shire",
    "side", "stead", "stoke", "stone", "stow", "ton", "vale", "view",
    "ville", "wall", "water", "well", "wick", "wold", "wood", "worth",
)

WORDS: Final[tuple[str, ...]] = tuple(
    f"{prefix}{suffix}" for prefix in _PREFIXES for suffix in _SUFFIXES
)
