"""Animals, in the plural since they always follow a number."""

from typing import Final

WORDS: Final[tuple[str, ...]] = (
    "ducks", "chickens", "toads", "mice", "cats", "dogs", "frogs", "owls",
    "foxes", "wolves", "bears", "deer", "rabbits", "hares", "squirrels", "badgers",
    "otters", "beavers", "moles", "hedgehogs", "bats", "rats", "hamsters", "gerbils",
    "ferrets", "weasels", "minks", "skunks", "raccoons", "possums", "moose", "elk",
    "bison", "buffaloes", "oxen", "cows", "bulls", "calves", "horses", "ponies",
    "donkeys", "mules", "zebras", "camels", "llamas", "alpacas", "goats", "sheep",
    "lambs", "pigs", "boars", "geese", "swans", "turkeys", "pigeons", "doves",
    "crows", "ravens", "magpies", "sparrows", "robins", "finches", "wrens", "larks",
    "hawks", "eagles", "falcons", "vultures", "herons", "storks", "cranes", "pelicans",
    "parrots", "penguins", "puffins", "gulls", "lions", "tigers", "leopards", "jaguars",
    "panthers", "cheetahs", "lynxes", "hyenas", "jackals", "monkeys", "apes", "gorillas",
    "lemurs", "sloths", "koalas", "kangaroos", "wombats", "pandas", "elephants", "rhinos",
    "hippos", "giraffes", "antelopes", "gazelles", "walruses", "seals", "whales", "dolphins",
    "sharks", "octopuses", "squids", "crabs", "lobsters", "shrimps", "snails", "slugs",
    "worms", "beetles", "ants", "bees", "wasps", "moths", "butterflies", "spiders",
    "lizards", "geckos", "snakes", "turtles", "tortoises", "newts", "salmon", "trout",
)
