"""Romaji lookup tables and kana classification."""

from types import MappingProxyType

# Palatalised and extended morae spelled with exactly three letters.
# Checked before MONOGRAPHS so that e.g. "sha" is never read as "s" + "ha".
DIGRAPHS = MappingProxyType({
    "kya": "きゃ", "kyu": "きゅ", "kyo": "きょ",
    "gya": "ぎゃ", "gyu": "ぎゅ", "gyo": "ぎょ",
    "sha": "しゃ", "shu": "しゅ", "sho": "しょ",
    "sya": "しゃ", "syu": "しゅ", "syo": "しょ",
    "cha": "ちゃ", "chu": "ちゅ", "cho": "ちょ",
    "cya": "ちゃ", "cyu": "ちゅ", "cyo": "ちょ",
    "nya": "にゃ", "nyu": "にゅ", "nyo": "にょ",
    "hya": "ひゃ", "hyu": "ひゅ", "hyo": "ひょ",
    "bya": "びゃ", "byu": "びゅ", "byo": "びょ",
    "pya": "ぴゃ", "pyu": "ぴゅ", "pyo": "ぴょ",
    "rya": "りゃ", "ryu": "りゅ", "ryo": "りょ",
    "mya": "みゃ", "myu": "みゅ", "myo": "みょ",
    "zya": "じゃ", "zyu": "じゅ", "zyo": "じょ",
    "tsa": "つぁ", "tsi": "つぃ", "tse": "つぇ", "tso": "つぉ",
})

# Single morae spelled with one to three letters, tried longest first.
MONOGRAPHS = MappingProxyType({
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "sa": "さ", "si": "し", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    "za": "ざ", "zi": "じ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    # Hepburn j- has no y. These live here, not in DIGRAPHS: that table is only
    # probed with three-letter slices, so "ja" there would match only at the
    # end of input and "jan" would read jあん instead of じゃん.
    "ja": "じゃ", "ju": "じゅ", "jo": "じょ",
    "ta": "た", "ti": "ち", "chi": "ち", "tu": "つ", "tsu": "つ", "te": "て", "to": "と",
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "ha": "は", "hi": "ひ", "hu": "ふ", "fu": "ふ", "he": "へ", "ho": "ほ",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "ya": "や", "yi": "い", "yu": "ゆ", "ye": "いぇ", "yo": "よ",
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "wa": "わ", "wi": "うぃ", "we": "うぇ", "wo": "を",
    "n": "ん", "nn": "ん",
})

HIRAGANA_BLOCK = (0x3040, 0x309F)
KATAKANA_BLOCK = (0x30A0, 0x30FF)


def is_kana(ch: str) -> bool:
    """Return True if *ch* is a single Hiragana or Katakana block character."""
    if len(ch) != 1:
        return False
    cp = ord(ch)
    return (HIRAGANA_BLOCK[0] <= cp <= HIRAGANA_BLOCK[1]
            or KATAKANA_BLOCK[0] <= cp <= KATAKANA_BLOCK[1])
