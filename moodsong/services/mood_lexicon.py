from __future__ import annotations

import re
from typing import Any

TraitPartial = dict[str, Any]

MAJOR: TraitPartial = {"mode": "major"}
MINOR: TraitPartial = {"mode": "minor"}

LOW_ENERGY: TraitPartial = {"energy": "low"}
MEDIUM_ENERGY: TraitPartial = {"energy": "medium"}
HIGH_ENERGY: TraitPartial = {"energy": "high"}

LOW_TENSION: TraitPartial = {"tension": "low"}
MEDIUM_TENSION: TraitPartial = {"tension": "medium"}
HIGH_TENSION: TraitPartial = {"tension": "high"}

DARK: TraitPartial = {"brightness": "dark"}
NEUTRAL: TraitPartial = {"brightness": "neutral"}
BRIGHT: TraitPartial = {"brightness": "bright"}

JAZZY: TraitPartial = {"use_sevenths": True, "use_borrowed_chords": True}
COLORFUL: TraitPartial = {"use_borrowed_chords": True}
SUSPENDED: TraitPartial = {"use_suspensions": True}
EXTENDED: TraitPartial = {"use_sevenths": True}
INVERSIONS: TraitPartial = {"use_inversions": True}
PEDAL_BASS: TraitPartial = {"pedal_bass_chance": 0.4}
SMOOTH_BASS: TraitPartial = {"use_inversions": True, "pedal_bass_chance": 0.2}

VERY_SLOW: TraitPartial = {"tempo_range": (40, 60)}
SLOW: TraitPartial = {"tempo_range": (55, 80)}
MODERATE: TraitPartial = {"tempo_range": (75, 105)}
MEDIUM: TraitPartial = {"tempo_range": (95, 125)}
FAST: TraitPartial = {"tempo_range": (120, 150)}
VERY_FAST: TraitPartial = {"tempo_range": (145, 180)}


def traits(*partials: TraitPartial) -> TraitPartial:
    merged: TraitPartial = {}
    for partial in partials:
        merged.update(partial)
    return merged


# (words, trait presets) in merge order; later groups never redefine earlier words.
_KEYWORD_GROUPS: list[tuple[tuple[str, ...], tuple[TraitPartial, ...]]] = [
    # sad, melancholic
    (("sad", "sadness"), (MINOR, LOW_ENERGY, DARK, SLOW)),
    (("melancholy", "melancholic", "heartbreak", "heartbroken", "heartache"), (MINOR, LOW_ENERGY, DARK, EXTENDED)),
    (("depressed", "depressing", "depression", "grief", "grieving", "mournful", "mourning"), (MINOR, LOW_ENERGY, DARK, VERY_SLOW)),
    (("lonely", "loneliness", "alone", "lost"), (MINOR, LOW_ENERGY, MEDIUM_TENSION)),
    (
        (
            "isolated", "sorrow", "sorrowful", "tearful", "tears", "crying", "weeping", "somber", "gloomy", "gloom",
            "bleak", "hopeless", "hopelessness", "miserable", "misery", "unhappy", "dejected", "downcast",
            "downhearted", "crestfallen", "dismal", "forlorn", "desolate", "woeful", "woe", "hurt", "hurting", "pain",
            "painful", "suffering", "broken", "shattered", "devastated", "crushed", "hollow", "numb", "abandoned",
            "forsaken", "rejected",
        ),
        (MINOR, LOW_ENERGY, DARK),
    ),
    (("despair", "despairing", "anguish", "anguished"), (MINOR, LOW_ENERGY, DARK, HIGH_TENSION)),
    (("torment", "tormented", "betrayed", "bitter", "resentful", "resentment", "frustrated", "frustration"), (MINOR, MEDIUM_ENERGY, DARK, HIGH_TENSION)),
    (("empty", "emptiness"), (MINOR, LOW_ENERGY, DARK, SUSPENDED)),
    # happy, joyful
    (("happy", "happiness", "upbeat", "ecstatic", "ecstasy", "euphoric", "euphoria", "festive", "lively", "triumphant"), (MAJOR, HIGH_ENERGY, BRIGHT, FAST)),
    (
        (
            "joyful", "joy", "joyous", "cheerful", "cheery", "elated", "elation", "delighted", "delight", "delightful",
            "gleeful", "glee", "merry", "jolly", "jovial", "celebratory", "celebration", "exuberant", "vibrant",
            "bubbly", "playful", "fun", "funny", "beaming", "laughing", "amazing", "fantastic", "triumph",
            "victorious", "victory", "glorious", "glory", "anthemic", "anthem", "soaring", "motivation",
            "motivational", "empowering", "confident", "confidence",
        ),
        (MAJOR, HIGH_ENERGY, BRIGHT),
    ),
    (
        (
            "uplifting", "blissful", "bliss", "carefree", "lighthearted", "optimistic", "hopeful", "hope", "positive",
            "radiant", "smiling", "sunshine", "sunny", "golden", "warm", "warmth", "pleased", "lucky", "fortunate",
            "beautiful",
        ),
        (MAJOR, MEDIUM_ENERGY, BRIGHT),
    ),
    (("bright",), (MAJOR, BRIGHT)),
    (("content", "contentment"), (MAJOR, LOW_ENERGY, BRIGHT, LOW_TENSION)),
    (("satisfied", "grateful", "gratitude", "thankful", "blessed"), (MAJOR, LOW_ENERGY, BRIGHT)),
    # angry, aggressive
    (("angry", "anger", "aggressive", "aggression"), (MINOR, HIGH_ENERGY, DARK, HIGH_TENSION, FAST)),
    (("furious", "fury", "enraged", "rage", "raging", "violent"), (MINOR, HIGH_ENERGY, DARK, HIGH_TENSION, VERY_FAST)),
    (
        (
            "mad", "livid", "outraged", "hostile", "fierce", "ferocious", "brutal", "savage", "rebellious", "defiant",
            "vengeful", "revenge", "hateful", "hatred",
        ),
        (MINOR, HIGH_ENERGY, DARK, HIGH_TENSION),
    ),
    (("annoyed", "irritated", "moody"), (MINOR, MEDIUM_ENERGY, DARK)),
    # fear, anxiety
    (("afraid", "fear", "fearful", "scared", "scary", "horror", "horrifying"), (MINOR, MEDIUM_ENERGY, DARK, HIGH_TENSION)),
    (("terrified", "terrifying", "terror"), (MINOR, HIGH_ENERGY, DARK, HIGH_TENSION)),
    (("anxious", "anxiety", "nervous", "worried", "worry", "uneasy", "restless"), (MINOR, MEDIUM_ENERGY, HIGH_TENSION)),
    (("paranoid", "paranoia"), (MINOR, MEDIUM_ENERGY, DARK, HIGH_TENSION)),
    (("tense", "tension"), (MINOR, HIGH_TENSION, COLORFUL)),
    (("creepy", "eerie", "spooky", "haunted", "dread", "dreading", "foreboding"), (MINOR, LOW_ENERGY, DARK, HIGH_TENSION)),
    (("haunting",), (MINOR, LOW_ENERGY, DARK, MEDIUM_TENSION, EXTENDED)),
    (("suspense", "suspenseful"), (MINOR, HIGH_TENSION, LOW_ENERGY)),
    (("thriller",), (MINOR, HIGH_TENSION, MEDIUM_ENERGY)),
    # peaceful, calm
    (("peaceful", "peace", "calm", "calming", "tranquil", "tranquility", "quiet", "zen", "restful"), (MAJOR, LOW_ENERGY, LOW_TENSION, SLOW)),
    (
        (
            "serene", "serenity", "relaxed", "relaxing", "chilled", "chillout", "soothing", "gentle", "soft",
            "mindful", "easy", "easygoing", "laidback",
        ),
        (MAJOR, LOW_ENERGY, LOW_TENSION),
    ),
    (("chill",), (MAJOR, LOW_ENERGY, LOW_TENSION, MODERATE)),
    (("mellow",), (MAJOR, LOW_ENERGY, LOW_TENSION, EXTENDED)),
    (("silent", "stillness", "still", "sleepy", "drowsy", "lullaby"), (MAJOR, LOW_ENERGY, LOW_TENSION, VERY_SLOW)),
    (("meditative", "meditation"), (MAJOR, LOW_ENERGY, LOW_TENSION, SLOW, SUSPENDED)),
    (("dreamy", "dreamlike"), (MAJOR, LOW_ENERGY, NEUTRAL, EXTENDED, SUSPENDED, SMOOTH_BASS)),
    (("hazy",), (MAJOR, LOW_ENERGY, NEUTRAL, SUSPENDED)),
    # romantic, loving
    (("romantic", "romance"), (MAJOR, LOW_ENERGY, EXTENDED, SLOW)),
    (("loving", "affectionate", "affection", "devotion", "adoring", "cherish", "sweetheart", "sweet", "heartfelt"), (MAJOR, LOW_ENERGY, BRIGHT)),
    (("love", "inlove", "crush", "flirty", "wedding"), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("passionate", "passion"), (MAJOR, MEDIUM_ENERGY, MEDIUM_TENSION, EXTENDED)),
    (("intimate", "intimacy"), (MAJOR, LOW_ENERGY, LOW_TENSION, EXTENDED)),
    (("tender", "tenderness"), (MAJOR, LOW_ENERGY, LOW_TENSION)),
    (("sensual",), (MAJOR, LOW_ENERGY, MEDIUM_TENSION, EXTENDED)),
    (("sexy", "seductive", "longing", "yearning"), (MINOR, LOW_ENERGY, MEDIUM_TENSION, EXTENDED)),
    (("desire",), (MINOR, MEDIUM_ENERGY, MEDIUM_TENSION)),
    (("soulmate",), (MAJOR, LOW_ENERGY, BRIGHT, EXTENDED)),
    # nostalgic, reflective
    (("nostalgic", "nostalgia"), (MAJOR, LOW_ENERGY, EXTENDED, COLORFUL)),
    (("memories", "memory", "remembering", "reminiscent", "reminiscing", "sentimental", "vintage"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("retro", "timeless"), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("oldschool", "classic", "throwback"), (MAJOR, MEDIUM_ENERGY)),
    (("reflective", "reflection", "contemplative", "contemplation", "thoughtful", "pensive", "introspective"), (LOW_ENERGY, EXTENDED)),
    (("bittersweet",), (COLORFUL, EXTENDED)),
    (("wistful", "lonesome", "homesick"), (MINOR, LOW_ENERGY, EXTENDED)),
    # epic, powerful
    (("epic",), (MINOR, HIGH_ENERGY, HIGH_TENSION, COLORFUL)),
    (("powerful", "power", "warrior", "battle", "fight", "fighting"), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("heroic", "hero", "grandiose", "magnificent"), (MAJOR, HIGH_ENERGY, COLORFUL)),
    (("majestic", "grand"), (MAJOR, MEDIUM_ENERGY, COLORFUL)),
    (("mighty", "determined", "determination", "bold", "fearless", "conquer"), (MAJOR, HIGH_ENERGY, HIGH_TENSION)),
    (("brave", "courageous", "strong", "strength"), (MAJOR, HIGH_ENERGY)),
    # mysterious, ethereal
    (("mysterious", "mystery", "enigmatic", "enigma"), (MINOR, MEDIUM_TENSION, EXTENDED)),
    (("mystical",), (MINOR, LOW_ENERGY, EXTENDED)),
    (("ethereal",), (MAJOR, LOW_ENERGY, EXTENDED, SUSPENDED, INVERSIONS)),
    (("otherworldly", "cosmic", "space", "spacey"), (MAJOR, LOW_ENERGY, EXTENDED, SUSPENDED)),
    (("celestial",), (MAJOR, LOW_ENERGY, EXTENDED, BRIGHT)),
    (("heavenly", "angelic"), (MAJOR, LOW_ENERGY, BRIGHT)),
    (("spiritual", "sacred", "enchanting", "enchanted", "floating"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("divine", "fairytale", "whimsical"), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("magical", "magic", "fantasy"), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("surreal",), (MINOR, LOW_ENERGY, EXTENDED, SUSPENDED)),
    (("psychedelic", "trippy"), (MAJOR, MEDIUM_ENERGY, EXTENDED, COLORFUL)),
    (("hypnotic",), (MINOR, LOW_ENERGY, MEDIUM_TENSION)),
    (("underwater", "weightless"), (MAJOR, LOW_ENERGY, SUSPENDED)),
    (("ambient",), (MAJOR, LOW_ENERGY, LOW_TENSION, EXTENDED, INVERSIONS)),
    (("atmospheric",), (LOW_ENERGY, EXTENDED, SMOOTH_BASS)),
    (("cinematic", "filmscore"), (MINOR, MEDIUM_ENERGY, COLORFUL, EXTENDED, PEDAL_BASS)),
    (("soundtrack",), (MEDIUM_ENERGY, COLORFUL)),
    (("galactic",), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("alien",), (MINOR, LOW_ENERGY, EXTENDED)),
    (("futuristic",), (MEDIUM_ENERGY, EXTENDED)),
    # dark
    (("dark", "darkness"), (MINOR, DARK, COLORFUL)),
    (("brooding", "shadowy", "shadows", "macabre", "morbid"), (MINOR, LOW_ENERGY, DARK)),
    (("sinister",), (MINOR, LOW_ENERGY, DARK, HIGH_TENSION)),
    (("menacing", "threatening"), (MINOR, MEDIUM_ENERGY, DARK, HIGH_TENSION)),
    (("ominous",), (MINOR, DARK, HIGH_TENSION, LOW_ENERGY)),
    (("gothic", "grim"), (MINOR, MEDIUM_ENERGY, DARK)),
    (("doom", "doommetal"), (MINOR, LOW_ENERGY, DARK, VERY_SLOW)),
    (("noir",), (MINOR, LOW_ENERGY, DARK, EXTENDED)),
    (("cold", "frozen", "icy"), (MINOR, LOW_ENERGY, DARK)),
    # energetic
    (("energetic", "energy", "driving", "pumping", "pounding"), (HIGH_ENERGY, FAST)),
    (("intense", "intensity", "electric", "electrifying", "thrilling", "wild", "crazy"), (HIGH_ENERGY, HIGH_TENSION)),
    (("pulsing",), (HIGH_ENERGY, MEDIUM_TENSION)),
    (("explosive", "frantic", "frenetic"), (HIGH_ENERGY, HIGH_TENSION, VERY_FAST)),
    (("exciting", "excitement"), (HIGH_ENERGY, BRIGHT)),
    (("adrenaline", "rush"), (HIGH_ENERGY, HIGH_TENSION, FAST)),
    (("unstoppable", "relentless"), (HIGH_ENERGY, HIGH_TENSION)),
    (("chaotic",), (HIGH_ENERGY, HIGH_TENSION, COLORFUL)),
    # rock, pop
    (("rock",), (HIGH_ENERGY, FAST)),
    (("rocknroll", "punk", "punkrock"), (MAJOR, HIGH_ENERGY, FAST)),
    (("hardrock",), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("softrock",), (MAJOR, MEDIUM_ENERGY)),
    (("indierock", "altrock", "alternative"), (MEDIUM_ENERGY,)),
    (("grunge",), (MINOR, MEDIUM_ENERGY, DARK)),
    (("metal", "heavymetal"), (MINOR, HIGH_ENERGY, HIGH_TENSION, DARK)),
    (("deathmetal", "blackmetal"), (MINOR, HIGH_ENERGY, HIGH_TENSION, DARK, VERY_FAST)),
    (("thrashmetal",), (MINOR, HIGH_ENERGY, HIGH_TENSION, VERY_FAST)),
    (("sludge",), (MINOR, MEDIUM_ENERGY, DARK, SLOW)),
    (("stoner",), (MINOR, MEDIUM_ENERGY, SLOW)),
    (("postpunk", "emo"), (MINOR, MEDIUM_ENERGY, DARK)),
    (("screamo", "metalcore"), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("hardcore",), (MINOR, HIGH_ENERGY, HIGH_TENSION, VERY_FAST)),
    (("pop", "poppy", "synthpop", "electropop"), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("indiepop", "synthwave", "retrowave"), (MAJOR, MEDIUM_ENERGY)),
    (("dreampop",), (MAJOR, LOW_ENERGY, EXTENDED, SUSPENDED)),
    # electronic
    (("dance", "edm", "house"), (MAJOR, HIGH_ENERGY, FAST)),
    (("techno",), (MINOR, HIGH_ENERGY, FAST)),
    (("deephouse",), (MINOR, MEDIUM_ENERGY, EXTENDED)),
    (("trance",), (MINOR, HIGH_ENERGY, MEDIUM_TENSION)),
    (("dubstep",), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("dnb", "drumandbass"), (MINOR, HIGH_ENERGY, VERY_FAST)),
    (("breakbeat",), (MEDIUM_ENERGY, FAST)),
    (("electronic", "electronica"), (MEDIUM_ENERGY,)),
    (("idm", "glitch"), (LOW_ENERGY, EXTENDED, COLORFUL)),
    (("lofi",), (MAJOR, LOW_ENERGY, EXTENDED, SLOW)),
    (("vaporwave", "chillwave", "chillhop"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("disco",), (MAJOR, HIGH_ENERGY, BRIGHT, FAST)),
    # jazz, blues, soul
    (("jazz", "jazzy", "fusion", "jazzfusion"), (EXTENDED, COLORFUL)),
    (("smoothjazz", "cooljazz", "neosoul"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("bebop",), (MINOR, HIGH_ENERGY, EXTENDED, FAST)),
    (("swing", "groovy", "groove"), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("bigband", "funk", "funky"), (MAJOR, HIGH_ENERGY, EXTENDED)),
    (("blues",), (MAJOR, EXTENDED, SLOW)),
    (("bluesy",), (MAJOR, EXTENDED)),
    (("rnb", "soul", "soulful"), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("motown",), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("gospel",), (MAJOR, HIGH_ENERGY, BRIGHT)),
    (("rhythm",), (MAJOR, MEDIUM_ENERGY)),
    # folk, acoustic
    (("folk", "folky", "acoustic", "unplugged", "campfire"), (MAJOR, LOW_ENERGY, LOW_TENSION)),
    (("indiefolk", "americana", "singer", "songwriter"), (MAJOR, LOW_ENERGY)),
    (("folkrock", "country", "countryrock"), (MAJOR, MEDIUM_ENERGY)),
    (("bluegrass",), (MAJOR, HIGH_ENERGY, FAST)),
    # classical
    (("classical", "orchestral", "symphony", "symphonic", "neoclassical"), (EXTENDED, COLORFUL)),
    (("baroque",), (MAJOR, MEDIUM_ENERGY, EXTENDED)),
    (("romanticera", "romanticism", "impressionist"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("minimalist",), (MAJOR, LOW_ENERGY, LOW_TENSION)),
    (("chamber",), (LOW_ENERGY, EXTENDED)),
    (("avantgarde", "experimental"), (EXTENDED, COLORFUL)),
    (("contemporary",), (EXTENDED,)),
    # world
    (("latin", "african", "afrobeat"), (MAJOR, HIGH_ENERGY)),
    (("salsa", "samba", "ska"), (MAJOR, HIGH_ENERGY, FAST)),
    (("bossa", "bossanova"), (MAJOR, LOW_ENERGY, EXTENDED)),
    (("flamenco",), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("reggae",), (MAJOR, LOW_ENERGY)),
    (("dub",), (MINOR, LOW_ENERGY)),
    (("tropical",), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("caribbean", "celtic", "irish", "scottish"), (MAJOR, MEDIUM_ENERGY)),
    (("eastern", "middleeastern", "arabic"), (MINOR, MEDIUM_ENERGY)),
    (("indian", "asian", "chinese", "korean"), (MEDIUM_ENERGY,)),
    (("japanese",), (LOW_ENERGY,)),
    (("gypsy",), (MINOR, HIGH_ENERGY, COLORFUL)),
    (("world",), (EXTENDED,)),
    # hip hop
    (("hiphop", "rap", "boom", "bap", "boombap", "underground"), (MINOR, MEDIUM_ENERGY)),
    (("trap", "gangsta"), (MINOR, MEDIUM_ENERGY, DARK)),
    (("oldschoolhiphop",), (MAJOR, MEDIUM_ENERGY)),
    # time of day, seasons
    (("morning", "sunrise", "dawn", "waking", "wakeup", "coffee"), (MAJOR, LOW_ENERGY, BRIGHT)),
    (("afternoon",), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("evening",), (MAJOR, LOW_ENERGY, NEUTRAL)),
    (("sunset",), (MAJOR, LOW_ENERGY, NEUTRAL, EXTENDED)),
    (("twilight",), (MINOR, LOW_ENERGY, DARK, EXTENDED)),
    (("dusk", "night", "nighttime", "midnight", "latenight", "nocturnal"), (MINOR, LOW_ENERGY, DARK)),
    (("summer",), (MAJOR, HIGH_ENERGY, BRIGHT)),
    (("spring",), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("autumn", "fall"), (MINOR, LOW_ENERGY, NEUTRAL)),
    (("winter",), (MINOR, LOW_ENERGY, DARK)),
    # activities
    (("workout", "gym", "running", "exercise", "sports"), (MAJOR, HIGH_ENERGY, FAST)),
    (("jogging",), (MAJOR, MEDIUM_ENERGY, FAST)),
    (("studying", "study", "focus", "concentration", "working", "work", "reading"), (MAJOR, LOW_ENERGY, LOW_TENSION)),
    (("sleeping", "sleep"), (MAJOR, LOW_ENERGY, LOW_TENSION, VERY_SLOW)),
    (("party", "club", "dancing"), (MAJOR, HIGH_ENERGY, FAST)),
    (("roadtrip", "travel", "cooking"), (MAJOR, MEDIUM_ENERGY)),
    (("dinner",), (MAJOR, LOW_ENERGY)),
    (("gaming", "game"), (MEDIUM_ENERGY,)),
    (("adventure",), (MAJOR, HIGH_ENERGY, BRIGHT)),
    # nature, weather
    (("nature", "forest", "lake"), (MAJOR, LOW_ENERGY, LOW_TENSION)),
    (("ocean", "sea", "waves", "stars"), (MAJOR, LOW_ENERGY, SUSPENDED)),
    (("beach",), (MAJOR, LOW_ENERGY, BRIGHT)),
    (("woods", "trees", "river", "clouds"), (MAJOR, LOW_ENERGY)),
    (("mountain", "mountains"), (MAJOR, MEDIUM_ENERGY)),
    (("rain", "rainy", "moon", "moonlight", "desert"), (MINOR, LOW_ENERGY)),
    (("storm", "thunder"), (MINOR, HIGH_ENERGY, HIGH_TENSION)),
    (("stormy",), (MINOR, HIGH_ENERGY, DARK, HIGH_TENSION)),
    (("cloudy", "overcast", "grey", "gray"), (MINOR, LOW_ENERGY, DARK)),
    (("sky",), (MAJOR, MEDIUM_ENERGY, BRIGHT)),
    (("wind",), (MINOR, MEDIUM_ENERGY)),
    (("windy", "urban", "city", "street"), (MEDIUM_ENERGY,)),
    # decades
    (("50s", "60s", "70s", "fifties", "sixties", "seventies", "oldies"), (MAJOR, MEDIUM_ENERGY)),
    (("80s", "eighties"), (MAJOR, HIGH_ENERGY, BRIGHT)),
    (("90s", "2000s", "2010s", "nineties", "modern"), (MEDIUM_ENERGY,)),
]


def _build_lexicon() -> dict[str, TraitPartial]:
    lexicon: dict[str, TraitPartial] = {}
    for words, presets in _KEYWORD_GROUPS:
        partial = traits(*presets)
        for word in words:
            if word in lexicon:
                raise RuntimeError(f"Keyword '{word}' is defined twice in the mood lexicon.")
            lexicon[word] = partial
    return lexicon


MOOD_KEYWORDS: dict[str, TraitPartial] = _build_lexicon()


def _phrase(pattern: str, *presets: TraitPartial) -> tuple[re.Pattern[str], TraitPartial]:
    return re.compile(pattern), traits(*presets)


PHRASE_PATTERNS: list[tuple[re.Pattern[str], TraitPartial]] = [
    # feels like ...
    _phrase(r"feels?\s+like\s+(?:a\s+)?summer", MAJOR, HIGH_ENERGY, BRIGHT),
    _phrase(r"feels?\s+like\s+(?:a\s+)?winter", MINOR, LOW_ENERGY, DARK),
    _phrase(r"feels?\s+like\s+(?:a\s+)?spring", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"feels?\s+like\s+(?:a\s+|the\s+)?(?:fall|autumn)", MINOR, LOW_ENERGY),
    _phrase(r"feels?\s+like\s+(?:a\s+)?dream", MAJOR, LOW_ENERGY, EXTENDED, SUSPENDED),
    _phrase(r"feels?\s+like\s+flying", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"feels?\s+like\s+falling", MINOR, MEDIUM_ENERGY, HIGH_TENSION),
    _phrase(r"feels?\s+like\s+home", MAJOR, LOW_ENERGY, LOW_TENSION),
    _phrase(r"feels?\s+like\s+(?:a\s+)?goodbye", MINOR, LOW_ENERGY),
    _phrase(r"feels?\s+like\s+(?:a\s+)?party", MAJOR, HIGH_ENERGY, FAST),
    _phrase(r"feels?\s+like\s+(?:the\s+)?end\b", MINOR, LOW_ENERGY, DARK),
    _phrase(r"feels?\s+like\s+(?:a\s+)?beginning", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"feels?\s+like\s+rain", MINOR, LOW_ENERGY),
    _phrase(r"feels?\s+like\s+sunshine", MAJOR, MEDIUM_ENERGY, BRIGHT),
    # sounds of ...
    _phrase(r"sounds?\s+of\s+(?:the\s+)?(?:ocean|sea|waves)", MAJOR, LOW_ENERGY, SUSPENDED),
    _phrase(r"sounds?\s+of\s+(?:the\s+)?city", MEDIUM_ENERGY),
    _phrase(r"sounds?\s+of\s+(?:the\s+)?(?:forest|nature)", MAJOR, LOW_ENERGY, LOW_TENSION),
    _phrase(r"sounds?\s+of\s+(?:the\s+)?night", MINOR, LOW_ENERGY, DARK),
    _phrase(r"sounds?\s+of\s+silence", MAJOR, LOW_ENERGY, LOW_TENSION, VERY_SLOW),
    _phrase(r"sounds?\s+of\s+(?:the\s+)?rain", MINOR, LOW_ENERGY),
    _phrase(r"sounds?\s+of\s+(?:the\s+)?storm", MINOR, HIGH_ENERGY, HIGH_TENSION),
    # ... vibes
    _phrase(r"summer\s+vibes?", MAJOR, HIGH_ENERGY, BRIGHT),
    _phrase(r"chill\s+vibes?", MAJOR, LOW_ENERGY, LOW_TENSION),
    _phrase(r"good\s+vibes?", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"(?:bad|dark|sad|night)\s+vibes?", MINOR, LOW_ENERGY, DARK),
    _phrase(r"happy\s+vibes?", MAJOR, HIGH_ENERGY, BRIGHT),
    _phrase(r"party\s+vibes?", MAJOR, HIGH_ENERGY, FAST),
    _phrase(r"beach\s+vibes?", MAJOR, LOW_ENERGY, BRIGHT),
    _phrase(r"(?:city|90s?)\s+vibes?", MEDIUM_ENERGY),
    _phrase(r"retro\s+vibes?", MAJOR, MEDIUM_ENERGY),
    _phrase(r"vintage\s+vibes?", MAJOR, LOW_ENERGY),
    _phrase(r"80s?\s+vibes?", MAJOR, HIGH_ENERGY, BRIGHT),
    _phrase(r"lofi\s+vibes?", MAJOR, LOW_ENERGY, EXTENDED, SLOW),
    _phrase(r"jazz\s*y?\s+vibes?", EXTENDED, COLORFUL),
    # like a ...
    _phrase(r"like\s+a\s+(?:movie|film|soundtrack)", MEDIUM_ENERGY, COLORFUL),
    _phrase(r"like\s+a\s+lullaby", MAJOR, LOW_ENERGY, LOW_TENSION, VERY_SLOW),
    _phrase(r"like\s+a\s+(?:prayer|whisper)", MAJOR, LOW_ENERGY, LOW_TENSION),
    _phrase(r"like\s+a\s+(?:storm|fire)", MINOR, HIGH_ENERGY, HIGH_TENSION),
    _phrase(r"like\s+a\s+river", MAJOR, LOW_ENERGY),
    _phrase(r"like\s+a\s+heartbeat", MEDIUM_ENERGY),
    # time of day
    _phrase(r"late\s+night", MINOR, LOW_ENERGY, DARK),
    _phrase(r"(?:early\s+morning|golden\s+hour)", MAJOR, LOW_ENERGY, BRIGHT),
    _phrase(r"(?:blue\s+hour|rainy\s+day)", MINOR, LOW_ENERGY),
    _phrase(r"sunny\s+day", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"lazy\s+sunday", MAJOR, LOW_ENERGY, LOW_TENSION, SLOW),
    _phrase(r"monday\s+morning", MEDIUM_ENERGY),
    _phrase(r"friday\s+night", MAJOR, HIGH_ENERGY),
    _phrase(r"saturday\s+night", MAJOR, HIGH_ENERGY, FAST),
    # emotional states
    _phrase(r"\bin\s+love", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"falling\s+in\s+love", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"(?:broken\s+heart|heart\s*break)", MINOR, LOW_ENERGY, DARK),
    _phrase(r"(?:lost\s+in\s+thought|looking\s+back)", LOW_ENERGY, EXTENDED),
    _phrase(r"(?:lost\s+love|letting\s+go)", MINOR, LOW_ENERGY),
    _phrase(r"(?:new\s+beginning|fresh\s+start|looking\s+forward)", MAJOR, MEDIUM_ENERGY, BRIGHT),
    _phrase(r"moving\s+on", MAJOR, MEDIUM_ENERGY),
    # activities
    _phrase(r"road\s+trip", MAJOR, MEDIUM_ENERGY),
    _phrase(r"long\s+drive", MEDIUM_ENERGY),
    _phrase(r"(?:workout|party|dance)\s+music", MAJOR, HIGH_ENERGY, FAST),
    _phrase(r"(?:study|focus|background)\s+music", MAJOR, LOW_ENERGY, LOW_TENSION),
    _phrase(r"sleep\s+music", MAJOR, LOW_ENERGY, LOW_TENSION, VERY_SLOW),
    _phrase(r"dinner\s+music", MAJOR, LOW_ENERGY),
    # comparatives
    _phrase(r"more\s+upbeat", HIGH_ENERGY, FAST),
    _phrase(r"more\s+mellow", LOW_ENERGY, SLOW),
    _phrase(r"more\s+intense", HIGH_ENERGY, HIGH_TENSION),
    _phrase(r"(?:more\s+relaxed|less\s+intense)", LOW_ENERGY, LOW_TENSION),
    _phrase(r"more\s+energetic", HIGH_ENERGY),
    _phrase(r"less\s+energetic", LOW_ENERGY),
]

POSITIVE_WORDS = {
    "good", "great", "nice", "wonderful", "amazing", "awesome", "fantastic", "excellent",
    "beautiful", "lovely", "perfect", "best", "better", "fine", "pleasant", "delightful",
    "happy", "joy", "love", "hope", "peace", "calm", "bliss", "delight", "pleasure",
    "comfort", "warm", "bright", "light", "sweet", "kind", "gentle", "soft",
    "fun", "exciting", "thrilling", "inspiring", "uplifting", "energizing", "refreshing",
    "invigorating", "motivating", "empowering", "liberating", "freeing",
    "success", "win", "victory", "triumph", "achieve", "accomplish", "overcome",
    "conquer", "master", "excel", "thrive", "flourish", "prosper",
    "friend", "together", "unity", "harmony", "connection", "bond", "community",
    "celebrate", "party", "festive", "reunion", "gathering",
}

NEGATIVE_WORDS = {
    "bad", "terrible", "awful", "horrible", "worst", "worse", "poor", "unpleasant",
    "ugly", "nasty", "wrong", "broken", "failed", "failure",
    "sad", "sorrow", "grief", "pain", "hurt", "suffer", "misery", "despair",
    "depression", "anxiety", "fear", "terror", "horror", "dread", "worry",
    "angry", "rage", "fury", "hate", "hatred", "disgust", "bitter", "resentment",
    "hostile", "violent", "aggressive", "cruel", "harsh", "brutal",
    "loss", "lost", "gone", "dead", "death", "dying", "end", "ending", "over",
    "empty", "hollow", "void", "nothing", "nowhere", "alone", "lonely",
    "dark", "darkness", "shadow", "black", "bleak", "grim", "gloomy", "dreary",
    "cold", "frozen", "icy", "numb", "hopeless",
}

INTENSITY_AMPLIFIERS = {
    "very", "really", "extremely", "incredibly", "absolutely", "totally", "completely",
    "utterly", "deeply", "intensely", "profoundly", "overwhelmingly", "exceptionally",
    "remarkably", "extraordinarily", "tremendously", "immensely", "hugely", "massively",
    "super", "ultra", "mega", "hyper", "most", "so", "such",
}

INTENSITY_DIMINISHERS = {
    "slightly", "somewhat", "rather", "fairly", "moderately", "mildly", "gently", "softly",
    "subtly", "quietly", "barely", "hardly", "almost", "nearly", "partly", "partially",
}

NEGATION_WORDS = {
    "not", "no", "never", "neither", "nobody", "nothing", "nowhere", "none",
    "without", "lacking", "absent", "missing", "devoid", "don't", "doesn't",
    "didn't", "won't", "wouldn't", "couldn't", "shouldn't", "can't", "cannot",
    "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't", "hadn't",
}
