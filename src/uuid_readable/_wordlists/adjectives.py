"""Adjectives describing the animals at the end of a sentence."""

from typing import Final

WORDS: Final[tuple[str, ...]] = (
    "large", "narrow", "small", "tiny", "huge", "giant", "little", "tall",
    "short", "long", "wide", "thin", "fat", "slim", "round", "square",
    "flat", "curly", "fluffy", "furry", "fuzzy", "hairy", "bald", "smooth",
    "rough", "soft", "hard", "sharp", "blunt", "shiny", "dull", "bright",
    "dark", "pale", "golden", "silver", "red", "blue", "green", "yellow",
    "purple", "orange", "pink", "brown", "black", "white", "grey", "spotted",
    "striped", "speckled", "dotted", "painted", "happy", "sad", "angry", "calm",
    "brave", "shy", "bold", "proud", "humble", "clever", "wise", "silly",
    "foolish", "curious", "sleepy", "lazy", "busy", "eager", "jolly", "merry",
    "cheerful", "gloomy", "grumpy", "cranky", "fierce", "gentle", "kind", "cruel",
    "wild", "tame", "friendly", "lonely", "hungry", "thirsty", "full", "empty",
    "quick", "slow", "swift", "nimble", "clumsy", "graceful", "awkward", "lively",
    "noisy", "quiet", "loud", "silent", "polite", "rude", "honest", "sneaky",
    "loyal", "fickle", "jealous", "greedy", "generous", "modest", "vain", "nervous",
    "anxious", "relaxed", "tired", "energetic", "strong", "weak", "healthy", "sickly",
    "young", "old", "ancient", "new", "fresh", "stale", "clean", "dirty",
    "muddy", "dusty", "sandy", "wet", "dry", "damp", "soggy", "frozen",
    "warm", "hot", "cold", "chilly", "cool", "sunny", "rainy", "snowy",
    "windy", "stormy", "misty", "foggy", "cloudy", "starry", "lucky", "unlucky",
    "rich", "poor", "fancy", "plain", "pretty", "ugly", "handsome", "lovely",
    "cute", "adorable", "charming", "elegant", "scruffy", "tidy", "messy", "neat",
    "famous", "unknown", "royal", "noble", "gleeful", "common", "rare", "odd",
    "strange", "weird", "normal", "magic", "mystic", "secret", "hidden", "lost",
    "wandering", "dancing", "singing", "sleeping", "jumping", "running", "flying", "swimming",
    "laughing", "crying", "smiling", "grinning", "frowning", "yawning", "sneezing", "giggling",
    "hopping", "crawling", "climbing", "digging", "hiding", "seeking", "hunting", "dreaming",
    "thinking", "reading", "writing", "painting", "cooking", "baking", "eating", "drinking",
    "juggling", "whistling", "humming", "chanting", "shouting", "whispering", "mumbling", "roaring",
    "purring", "barking", "howling", "hissing", "buzzing", "chirping", "croaking", "squeaking",
    "bouncy", "wobbly", "tipsy", "dizzy", "giddy", "zany", "quirky", "spunky",
    "plucky", "peppy", "perky", "snappy", "zippy", "breezy", "cozy", "dainty",
    "feisty", "frisky", "hasty", "mighty", "moody", "rowdy", "sassy", "witty",
)
