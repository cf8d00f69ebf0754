"""
Verbs in the past tense.

The first 256 entries are plain verbs; the rest repeat them behind the
prefixes ``re``, ``out`` and ``over``. No plain verb starts with one of
those prefixes, which keeps every prefixed form distinct.
"""

from typing import Final

_PREFIXES: Final = ("", "re", "out", "over")
_VERBS: Final = (
    "jumped", "sang", "danced", "laughed", "slowed", "interrupted", "walked", "ran",
    "swam", "flew", "climbed", "crawled", "drifted", "wandered", "rushed", "hurried",
    "skipped", "hopped", "leaped", "dashed", "sprinted", "strolled", "marched", "paced",
    "roamed", "rambled", "sailed", "rowed", "paddled", "glided", "soared", "dived",
    "tumbled", "stumbled", "slipped", "slid", "rolled", "spun", "twirled", "whirled",
    "waved", "nodded", "winked", "smiled", "grinned", "frowned", "sighed", "yawned",
    "sneezed", "coughed", "whistled", "hummed", "chanted", "shouted", "yelled", "cried",
    "wept", "sobbed", "giggled", "chuckled", "cheered", "clapped", "bowed", "knelt",
    "sat", "stood", "leaned", "lay", "slept", "dozed", "napped", "woke",
    "dreamed", "thought", "pondered", "wondered", "guessed", "knew", "learned", "studied",
    "taught", "wrote", "drew", "painted", "sketched", "carved", "built", "made",
    "baked", "cooked", "boiled", "fried", "stirred", "mixed", "poured", "tasted",
    "ate", "drank", "sipped", "munched", "nibbled", "chewed", "swallowed", "fed",
    "grew", "planted", "watered", "picked", "gathered", "harvested", "dug", "buried",
    "found", "lost", "hid", "sought", "searched", "chased", "caught", "threw",
    "tossed", "kicked", "hit", "struck", "punched", "pushed", "pulled", "dragged",
    "lifted", "carried", "held", "hugged", "kissed", "touched", "tickled", "patted",
    "brushed", "combed", "washed", "scrubbed", "cleaned", "swept", "dusted", "polished",
    "fixed", "mended", "sewed", "knitted", "wove", "spied", "tied", "knotted",
    "opened", "closed", "locked", "knocked", "rang", "called", "asked", "answered",
    "told", "said", "spoke", "whispered", "mumbled", "muttered", "argued", "agreed",
    "joked", "teased", "praised", "thanked", "blessed", "cursed", "forgave", "promised",
    "bought", "sold", "paid", "traded", "gave", "took", "lent", "borrowed",
    "won", "fought", "battled", "defended", "attacked", "guarded", "saved", "helped",
    "led", "followed", "joined", "met", "greeted", "visited", "invited", "hosted",
    "played", "gambled", "juggled", "wrestled", "boxed", "fenced", "raced", "hiked",
    "camped", "fished", "hunted", "tracked", "trapped", "herded", "milked", "sheared",
    "counted", "measured", "weighed", "sorted", "stacked", "packed", "wrapped", "mailed",
    "sent", "shipped", "delivered", "fetched", "brought", "lit", "burned", "melted",
    "froze", "thawed", "shivered", "sweated", "panted", "blinked", "stared", "glanced",
    "peeked", "watched", "listened", "heard", "sniffed", "smelled", "felt", "shook",
    "trembled", "wiggled", "squirmed", "fidgeted", "stretched", "bent", "twisted", "flipped",
)

WORDS: Final[tuple[str, ...]] = tuple(
    f"{prefix}{verb}" for prefix in _PREFIXES for verb in _VERBS
)
