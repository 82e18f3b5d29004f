import pytest
from wordle_minimax.engine import (
    ALL_EXACT, NUM_CODES, classify, decode, encode,
    format_feedback, parse_feedback,
)
from wordle_minimax.errors import MalformedFeedback

WORDS = ["crane", "shine", "plant", "belle", "level", "lemon", "cools",
         "scoop", "eerie", "there", "speed", "abide", "geese", "llama"]


def _fb(guess, answer):
    return format_feedback(classify(decode(guess), decode(answer)))


# --- codec ---
def test_decode_encode():
    w = decode("crane\n")
    assert w == ("c", "r", "a", "n", "e")
    assert encode(w) == "crane"


@pytest.mark.parametrize("bad", ["cran", "cranes", "CRANE", "cr4ne", ""])
def test_decode_rejects_wrong_shape(bad):
    with pytest.raises(ValueError):
        decode(bad)


# --- golden feedback (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", ".+---"),
    ("level", "level", "+++++"),
    ("lemon", "level", "++..."),
    ("cools", "scoop", "--+.-"),
    ("scoop", "scoop", "+++++"),
    ("raise", "crane", "--..+"),
    ("stare", "crane", "..+-+"),
    ("crane", "shine", "...++"),
    ("speed", "abide", "..-.-"),
    ("eerie", "there", "-.-.+"),
    ("geese", "eerie", ".+-.+"),
])
def test_classify_golden(guess, answer, expected):
    assert _fb(guess, answer) == expected


def test_repeated_letter_consumed_by_exact_match():
    # the only 'a' in the answer is used by position 1, so position 2 is absent
    code = classify(decode("aabcd"), decode("aefgh"))
    assert code == 2 * 3 ** 4
    assert format_feedback(code) == "+...."


def test_exact_match_wins_over_earlier_misplaced_copy():
    # the only "l" in the answer is taken by the exact match at the end
    assert _fb("shall", "hotel") == ".-..+"
    assert _fb("lolly", "hotel") == "-+..."
    assert _fb("allot", "hotel") == ".-.--"


def test_classify_in_range_and_self_is_all_exact():
    for g in WORDS:
        for a in WORDS:
            code = classify(decode(g), decode(a))
            assert 0 <= code < NUM_CODES
        assert classify(decode(g), decode(g)) == ALL_EXACT


# --- feedback parsing ---
@pytest.mark.parametrize("line,code", [
    ("+++++", 242),
    (".....", 0),
    ("...++", 8),
    ("-----", 121),
    ("+....\n", 162),
])
def test_parse_feedback(line, code):
    assert parse_feedback(line) == code


@pytest.mark.parametrize("bad", ["++++", "++++++", "++x++", "GGGGG", ""])
def test_parse_feedback_rejects_malformed(bad):
    with pytest.raises(MalformedFeedback):
        parse_feedback(bad)


def test_format_feedback_inverse_and_range():
    assert format_feedback(parse_feedback("+-.-+")) == "+-.-+"
    with pytest.raises(ValueError):
        format_feedback(NUM_CODES)
    with pytest.raises(ValueError):
        format_feedback(-1)
