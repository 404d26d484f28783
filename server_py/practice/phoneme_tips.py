"""Canned improvement tips keyed by IPA symbol."""
from typing import Dict, List

PHONEME_TIPS: Dict[str, List[str]] = {
    "æ": [
        'Open your mouth wider, like saying "cat"',
        "Place your tongue low and flat in your mouth",
        "Keep your lips spread slightly",
    ],
    "ʌ": [
        'Make a short "uh" sound like in "cup"',
        "Keep your mouth relaxed and slightly open",
        "Position your tongue in the middle of your mouth",
    ],
    "ə": [
        'Make a neutral "uh" sound like in "about"',
        "Keep your mouth and tongue relaxed",
        "This is a very short, unstressed sound",
    ],
    "ɪ": [
        'Make a short "i" sound like in "bit"',
        "Keep your tongue high but relaxed",
        "Don't stretch your lips too much",
    ],
    "iː": [
        'Make a long "ee" sound like in "see"',
        "Keep your tongue high and tense",
        "Spread your lips slightly",
    ],
    "ʊ": [
        'Make a short "oo" sound like in "book"',
        "Round your lips loosely",
        "Keep the sound short and relaxed",
    ],
    "uː": [
        'Make a long "oo" sound like in "food"',
        "Round and push your lips forward",
        "Hold the sound a little longer",
    ],
    "ɛ": [
        'Make a short "e" sound like in "bed"',
        "Open your mouth a little more than for \"bit\"",
        "Keep your tongue in the front of your mouth",
    ],
    "ɑ": [
        'Make an open "ah" sound like in "father"',
        "Drop your jaw and keep your tongue low and back",
        "Don't round your lips",
    ],
    "ɔ": [
        'Make an "aw" sound like in "thought"',
        "Round your lips slightly",
        "Keep your tongue low and towards the back",
    ],
    "ɝ": [
        'Make the "er" sound like in "bird"',
        "Curl your tongue back without touching the roof of your mouth",
        "Keep your lips slightly rounded",
    ],
    "ɚ": [
        'Make a short, unstressed "er" like in "butter"',
        "Keep your tongue curled back and relaxed",
        "Don't add a separate vowel before the r-sound",
    ],
    "eɪ": [
        'Glide from "e" to "i" like in "day"',
        "Start with your mouth half open and close it slightly",
        "Make the glide smooth, not two separate sounds",
    ],
    "aɪ": [
        'Glide from "a" to "i" like in "time"',
        "Start with your jaw open and raise your tongue",
        "Keep the glide smooth",
    ],
    "ɔɪ": [
        'Glide from "aw" to "i" like in "boy"',
        "Start with rounded lips and spread them as you glide",
        "Keep both parts of the sound audible",
    ],
    "aʊ": [
        'Glide from "a" to "oo" like in "now"',
        "Start with your jaw open and round your lips as you close",
        "Keep the glide smooth",
    ],
    "oʊ": [
        'Glide from "o" to "oo" like in "go"',
        "Round your lips more as the sound ends",
        "Don't shorten it to a flat \"o\"",
    ],
    "θ": [
        'Place your tongue tip between your teeth, like in "think"',
        "Blow air gently over your tongue",
        "Don't let it turn into a \"t\" or \"s\"",
    ],
    "ð": [
        'Place your tongue tip between your teeth, like in "this"',
        "Use your voice while blowing air over your tongue",
        "Don't let it turn into a \"d\" or \"z\"",
    ],
    "ɹ": [
        'Pull your tongue back without touching the roof of your mouth, like in "red"',
        "Round your lips slightly",
        "Don't tap or trill the tongue",
    ],
    "l": [
        'Touch the ridge behind your top teeth with your tongue tip, like in "light"',
        "Let air flow around the sides of your tongue",
        "Keep your voice on",
    ],
    "v": [
        'Touch your top teeth to your bottom lip, like in "very"',
        "Use your voice while pushing air through",
        "Don't close your lips into a \"b\"",
    ],
    "w": [
        'Round your lips tightly, then open them, like in "water"',
        "Don't touch your teeth to your lip",
        "Move quickly into the next vowel",
    ],
    "ʃ": [
        'Round your lips and push air through, like in "she"',
        "Keep your tongue raised but not touching the roof of your mouth",
        "Make it softer and wider than \"s\"",
    ],
    "ʒ": [
        'Make a voiced "sh" sound like in "measure"',
        "Round your lips slightly",
        "Keep your voice on through the sound",
    ],
    "tʃ": [
        'Start with a "t" and release into "sh", like in "church"',
        "Round your lips slightly",
        "Make it one quick sound",
    ],
    "dʒ": [
        'Start with a "d" and release into a voiced "sh", like in "judge"',
        "Keep your voice on",
        "Make it one quick sound",
    ],
    "ŋ": [
        'Raise the back of your tongue to the soft palate, like in "sing"',
        "Let the air come out through your nose",
        "Don't add a \"g\" at the end",
    ],
    "h": [
        'Breathe out gently, like in "hat"',
        "Keep your mouth open in the shape of the next vowel",
        "Don't let it drop silent",
    ],
}

# Azure sometimes reports long vowels with an ASCII colon
PHONEME_TIPS["i:"] = PHONEME_TIPS["iː"]
PHONEME_TIPS["u:"] = PHONEME_TIPS["uː"]

def get_phoneme_tips(phoneme: str) -> List[str]:
    """Tips for an IPA symbol, or a generic template for unmapped symbols."""
    tips = PHONEME_TIPS.get(phoneme)
    if tips is not None:
        return list(tips)
    return [
        f'Focus on making the "{phoneme}" sound clearly',
        "Listen to the reference audio and try to match the sound",
        "Practice the sound in isolation before combining it with others",
    ]
