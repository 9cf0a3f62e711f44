"""Fixed catalogue of common English words for the word memory game.

Grouped roughly by length so similar-length distractors are easy to find.
"""

from __future__ import annotations

_RAW_WORDS: tuple[str, ...] = (
    # 4 letters
    "book", "tree", "fish", "door", "hand", "moon", "star", "rain", "snow", "wind",
    "fire", "lake", "hill", "road", "park", "bird", "frog", "bear", "wolf", "duck",
    "boat", "ship", "wave", "sand", "rock", "gold", "coin", "king", "ring", "bell",
    "wall", "roof", "lamp", "desk", "sock", "shoe", "coat", "mask", "gift", "cake",
    "milk", "rice", "soup", "meat", "salt", "bean", "corn", "leaf", "root", "seed",
    "kite", "drum", "harp", "nest", "pond", "farm", "barn", "mint", "pear", "plum",
    # 5 letters
    "apple", "beach", "chair", "dance", "eagle", "flame", "glass", "heart", "juice", "knife",
    "lemon", "mouse", "night", "ocean", "peace", "queen", "river", "smile", "table", "umbra",
    "video", "water", "youth", "zebra", "bread", "crown", "dream", "earth", "field", "grass",
    "horse", "image", "jewel", "light", "magic", "noise", "olive", "plant", "quick", "round",
    "sheep", "tower", "uncle", "voice", "wheat", "world", "young", "amber", "brain", "cloud",
    "daisy", "fruit", "giant", "honey", "piano", "storm", "tiger", "train", "whale", "clock",
    # 6 letters
    "garden", "bridge", "castle", "dragon", "engine", "forest", "guitar", "hammer", "island", "jacket",
    "kitten", "ladder", "market", "nature", "orange", "planet", "rabbit", "shadow", "temple", "valley",
    "window", "yellow", "anchor", "bottle", "candle", "empire", "flower", "hunter", "insect", "jungle",
    "kernel", "lizard", "monkey", "nation", "office", "pencil", "rocket", "salmon", "thread", "turtle",
    "violet", "weapon", "winter", "zombie", "butter", "cheese", "golden", "unfold", "saddle", "mirror",
    "basket", "carpet", "cotton", "feather", "parrot", "pepper", "silver", "spider", "summer", "tunnel",
    # 7 letters
    "balloon", "chicken", "dolphin", "freedom", "giraffe", "harmony", "journey", "kitchen", "library", "monster",
    "network", "octopus", "package", "rainbow", "sunrise", "thunder", "volcano", "whisper", "bedroom", "fiction",
    "gallery", "highway", "inspire", "justice", "leopard", "message", "nominee", "outdoor", "picture", "quarter",
    "respect", "science", "teacher", "uniform", "victory", "warrior", "wrestle", "classic", "destiny", "diamond",
    "iceberg", "blanket", "captain", "compass", "cottage", "crystal", "lantern", "mustard", "pyramid", "sparrow",
    # 8 letters
    "elephant", "mountain", "navigate", "paradise", "question", "remember", "sandwich", "together", "universe", "vacation",
    "hospital", "internet", "jalapeno", "midnight", "notebook", "opposite", "peaceful", "quadrant", "skeleton", "treasure",
    "umbrella", "vineyard", "yearbook", "zeppelin", "absolute", "backbone", "carnival", "daughter", "eloquent", "festival",
    "graceful", "handbook", "joyfully", "keyboard", "landmark", "mystical", "northern", "original", "passport", "riverbed",
    "sculptor", "tropical", "underdog", "valuable", "woodland", "abstract", "creature", "delicate", "enormous", "flexible",
    "grandeur", "heritage", "innovate", "juncture", "kingship", "lavender", "momentum", "newsroom", "overseas", "platform",
    "quixotic", "romantic", "starfish", "timeless", "variance", "wildfire", "yeomanry", "zodiacal", "balanced", "capacity",
    "decisive", "energize", "forecast", "grateful", "idealism", "judgment", "airplane", "bookcase", "calendar", "dinosaur",
    # 9+ letters
    "adventure", "beautiful", "butterfly", "chocolate", "discovery", "education", "fantastic", "happiness", "important", "landscape",
    "waterfall", "yesterday", "brilliant", "celebrate", "dangerous", "excellent", "furniture", "knowledge", "lightning", "wonderful",
    "xylophone", "astronaut", "blueberry", "crocodile", "detective", "fireplace", "hurricane", "kangaroo", "lighthouse", "telescope",
)

# Order-preserving de-duplication keeps targets distinct.
WORD_POOL: tuple[str, ...] = tuple(dict.fromkeys(w.lower() for w in _RAW_WORDS))


def word_pool_size() -> int:
    return len(WORD_POOL)
