"""
Built-in categories shipped with the game.

Every word carries a hint. Hints are deliberately vague: they should let
an imposter bluff through a round without handing them the word.
"""

from __future__ import annotations

from .models import Category, CategoryCatalog


ANIMALS = Category.build("animals", "Animals", [
    ("Elephant", "Big"),
    ("Giraffe", "Tall"),
    ("Penguin", "Cold"),
    ("Kangaroo", "Jump"),
    ("Dolphin", "Smart"),
    ("Octopus", "Arms"),
    ("Owl", "Night"),
    ("Snake", "Slither"),
    ("Turtle", "Slow"),
    ("Bee", "Busy"),
    ("Lion", "Pride"),
    ("Camel", "Desert"),
    ("Parrot", "Talk"),
    ("Zebra", "Stripes"),
    ("Bat", "Cave"),
    ("Shark", "Fin"),
])

FOOD = Category.build("food", "Food", [
    ("Pizza", "Slice"),
    ("Sushi", "Rice"),
    ("Pancake", "Breakfast"),
    ("Taco", "Shell"),
    ("Popcorn", "Cinema"),
    ("Burger", "Grill"),
    ("Ice cream", "Cone"),
    ("Spaghetti", "Fork"),
    ("Croissant", "Bakery"),
    ("Salad", "Green"),
    ("Chocolate", "Sweet"),
    ("Soup", "Bowl"),
    ("Cheese", "Aged"),
    ("Popsicle", "Stick"),
    ("Curry", "Spice"),
])

PLACES = Category.build("places", "Places", [
    ("Beach", "Sand"),
    ("Library", "Quiet"),
    ("Hospital", "Care"),
    ("Airport", "Gate"),
    ("Museum", "Exhibit"),
    ("Zoo", "Cages"),
    ("Casino", "Luck"),
    ("Supermarket", "Aisles"),
    ("Stadium", "Crowd"),
    ("Prison", "Bars"),
    ("Church", "Bells"),
    ("Submarine", "Deep"),
    ("Space station", "Orbit"),
    ("Cinema", "Screen"),
    ("Farm", "Barn"),
])

JOBS = Category.build("jobs", "Jobs", [
    ("Firefighter", "Hose"),
    ("Teacher", "Class"),
    ("Chef", "Kitchen"),
    ("Pilot", "Cockpit"),
    ("Dentist", "Smile"),
    ("Astronaut", "Helmet"),
    ("Plumber", "Pipes"),
    ("Lawyer", "Court"),
    ("Farmer", "Harvest"),
    ("Magician", "Trick"),
    ("Photographer", "Lens"),
    ("Librarian", "Shelves"),
    ("Mechanic", "Wrench"),
    ("Detective", "Clues"),
])

SPORTS = Category.build("sports", "Sports", [
    ("Football", "Goal"),
    ("Basketball", "Hoop"),
    ("Tennis", "Net"),
    ("Swimming", "Lanes"),
    ("Golf", "Hole"),
    ("Boxing", "Gloves"),
    ("Skiing", "Slope"),
    ("Surfing", "Waves"),
    ("Baseball", "Bat"),
    ("Cycling", "Pedal"),
    ("Volleyball", "Spike"),
    ("Bowling", "Pins"),
    ("Archery", "Target"),
    ("Chess", "Board"),
])

OBJECTS = Category.build("objects", "Everyday Objects", [
    ("Umbrella", "Rain"),
    ("Toothbrush", "Morning"),
    ("Mirror", "Reflection"),
    ("Scissors", "Cut"),
    ("Candle", "Flame"),
    ("Pillow", "Soft"),
    ("Clock", "Ticking"),
    ("Backpack", "Straps"),
    ("Ladder", "Climb"),
    ("Key", "Lock"),
    ("Wallet", "Pocket"),
    ("Headphones", "Music"),
    ("Kettle", "Boil"),
    ("Glasses", "Vision"),
])

MOVIES = Category.build("movies", "Movies", [
    ("Titanic", "Iceberg"),
    ("Jaws", "Ocean"),
    ("Frozen", "Sisters"),
    ("The Lion King", "Throne"),
    ("Star Wars", "Galaxy"),
    ("Jurassic Park", "Fossils"),
    ("Toy Story", "Playroom"),
    ("Harry Potter", "School"),
    ("Finding Nemo", "Reef"),
    ("The Matrix", "Choice"),
    ("Shrek", "Swamp"),
    ("Home Alone", "Holiday"),
])

NATURE = Category.build("nature", "Nature", [
    ("Volcano", "Eruption"),
    ("Rainbow", "Colors"),
    ("Waterfall", "Drop"),
    ("Desert", "Dunes"),
    ("Glacier", "Ice"),
    ("Thunderstorm", "Loud"),
    ("Forest", "Trees"),
    ("Island", "Surrounded"),
    ("Tornado", "Spin"),
    ("Cave", "Dark"),
    ("Sunset", "Evening"),
    ("River", "Flow"),
])


BUILTIN_CATEGORIES: tuple[Category, ...] = (
    ANIMALS,
    FOOD,
    PLACES,
    JOBS,
    SPORTS,
    OBJECTS,
    MOVIES,
    NATURE,
)


def create_builtin_catalog() -> CategoryCatalog:
    """Catalog of every built-in category."""
    return CategoryCatalog(BUILTIN_CATEGORIES)


_BUILTIN_CATALOG = create_builtin_catalog()


def get_category(category_id: str) -> Category | None:
    """Look up a built-in category by id."""
    return _BUILTIN_CATALOG.get(category_id)


def list_categories() -> list[Category]:
    """All built-in categories, in catalog order."""
    return list(BUILTIN_CATEGORIES)
