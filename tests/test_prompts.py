import json
import os

import pytest

from models import ReadingRequest
from prompts import (
    BASE_SYSTEM_INSTRUCTION,
    DEFAULT_READING_TYPE,
    MISSING_AGE,
    PREMIUM_PROMPT_SUFFIX,
    PREMIUM_SYSTEM_SUFFIX,
    READING_TYPES,
    build_prompt_details,
    has_free_text,
)


def make_request(**overrides):
    data = {"name": "Ada", "age": 34, "gender": "Female", "prompt": "", "readingType": DEFAULT_READING_TYPE}
    data.update(overrides)
    return ReadingRequest(**data)


def test_reading_types_cover_parameterised_families():
    for months in ("1", "3", "6", "9", "10", "12"):
        assert f"{months} MONTH FUTURE PREDICTION" in READING_TYPES
    for n in ("3", "6", "9"):
        assert f"{n} PSYCHIC FUTURE PREDICTION" in READING_TYPES
    assert "3 QUESTION TAROT READING" in READING_TYPES
    assert "5 QUESTION TAROT READING" in READING_TYPES
    assert "FUTURE WIFE READING" in READING_TYPES
    assert "NEW HOUSE PSYCHIC READING" in READING_TYPES
    assert DEFAULT_READING_TYPE in READING_TYPES
    assert len(READING_TYPES) == len(set(READING_TYPES))


@pytest.mark.parametrize("reading_type", READING_TYPES)
def test_every_reading_type_renders_both_ways(reading_type):
    for prompt in ("", "Will I find love?"):
        system, full = build_prompt_details(make_request(readingType=reading_type, prompt=prompt))
        assert system
        assert full
        assert "{" not in full and "}" not in full
        if prompt and reading_type != "BLIND READING":
            assert prompt in full


def test_general_reading_with_and_without_prompt():
    system, full = build_prompt_details(make_request(prompt="my new job"))
    assert system == BASE_SYSTEM_INSTRUCTION
    assert full.startswith("Client: Ada, Age: 34, Gender: Female. ")
    assert 'They are seeking a general reading regarding: "my new job".' in full

    _, full = build_prompt_details(make_request(prompt="   "))
    assert "They are seeking a general psychic reading about their life path." in full


def test_unknown_type_falls_back_to_default_template():
    system, full = build_prompt_details(make_request(readingType="TEA LEAF READING", prompt="career"))
    assert system == BASE_SYSTEM_INSTRUCTION
    assert full == (
        "Client's Name: Ada\nClient's Age: 34\nClient's Gender: Female\n\n"
        'Their question is:\n"career"\n\nPlease provide a general psychic reading.'
    )


def test_system_instruction_append_and_replace():
    system, _ = build_prompt_details(make_request(readingType="CORD-CUTTING GUIDANCE READING"))
    assert system.startswith(BASE_SYSTEM_INSTRUCTION)
    assert system.endswith("reclaiming personal energy and peace.")

    system, _ = build_prompt_details(make_request(readingType="WATER SCRYING READING"))
    assert system.startswith("You are 'Scarlett', a water scryer.")
    assert BASE_SYSTEM_INSTRUCTION not in system


def test_premium_suffix_appended_to_both():
    system, full = build_prompt_details(make_request(isPremium=True))
    assert system.endswith(PREMIUM_SYSTEM_SUFFIX)
    assert full.endswith(PREMIUM_PROMPT_SUFFIX)
    assert "**PREMIUM INSTRUCTIONS:**" in full

    replaced, _ = build_prompt_details(make_request(readingType="RUNE CASTING", isPremium=True))
    assert replaced.endswith(PREMIUM_SYSTEM_SUFFIX)


def test_month_prediction_uses_count():
    _, full = build_prompt_details(make_request(readingType="9 MONTH FUTURE PREDICTION"))
    assert "for the next 9 month(s)" in full
    assert "They are seeking a general forecast." in full


def test_question_reading_switches_whole_template():
    _, full = build_prompt_details(make_request(readingType="5 QUESTION TAROT READING", prompt="1? 2? 3? 4? 5?"))
    assert "has 5 specific questions" in full
    assert full.endswith('Client\'s questions:\n"1? 2? 3? 4? 5?"')

    _, full = build_prompt_details(make_request(readingType="3 QUESTION TAROT READING"))
    assert "selected a 3 Question reading but did not provide any questions" in full


def test_partner_and_item_variants():
    _, husband = build_prompt_details(make_request(readingType="FUTURE HUSBAND READING"))
    _, wife = build_prompt_details(make_request(readingType="FUTURE WIFE READING"))
    assert "their future husband" in husband
    assert "their future wife" in wife

    _, car = build_prompt_details(make_request(readingType="NEW CAR PSYCHIC READING"))
    assert "manifesting a new car" in car


def test_fertility_readings_carry_medical_disclaimer():
    for reading_type in ("WHEN WILL I CONCEIVE READING", "CONCEPTION READING",
                         "FERTILITY PSYCHIC READING", "PREGNANCY PSYCHIC READING", "FUTURE CHILDREN READING"):
        system, full = build_prompt_details(make_request(readingType=reading_type))
        assert "not a medical professional" in system
        assert "mandatory disclaimer" in full


def test_pendulum_substitutes_placeholder_question():
    _, full = build_prompt_details(make_request(readingType="YES OR NO PENDULUM READING"))
    assert 'They have asked: "a question requiring a yes or no answer".' in full

    _, full = build_prompt_details(make_request(readingType="YES OR NO PENDULUM READING", prompt="Should I move?"))
    assert 'They have asked: "Should I move?".' in full


def test_missing_age_and_braces_in_user_text():
    _, full = build_prompt_details(make_request(age=None, prompt="what about {name} and {0}?"))
    assert f"Age: {MISSING_AGE}" in full
    assert "Age: not specified" in full
    assert "null" not in full and "None" not in full
    assert "what about {name} and {0}?" in full


def test_has_free_text():
    assert not has_free_text("")
    assert not has_free_text("  \n ")
    assert not has_free_text(None)
    assert has_free_text(" hi ")


with open(os.path.join(os.path.dirname(__file__), "fixtures", "prompts.json"), encoding="utf-8") as f:
    GOLDEN = json.load(f)


@pytest.mark.parametrize("reading_type", sorted(GOLDEN["readings"]))
@pytest.mark.parametrize("premium", [False, True])
def test_prompt_text_matches_golden_fixture(reading_type, premium):
    expected = GOLDEN["readings"][reading_type]
    system_suffix = GOLDEN["premium_system_suffix"] if premium else ""
    prompt_suffix = GOLDEN["premium_prompt_suffix"] if premium else ""
    base = {"name": GOLDEN["name"], "age": GOLDEN["age"], "gender": GOLDEN["gender"],
            "readingType": reading_type, "isPremium": premium}

    system, full = build_prompt_details(ReadingRequest(prompt=GOLDEN["prompt"], **base))
    assert system == expected["system"] + system_suffix
    assert full == expected["with_prompt"] + prompt_suffix

    system, full = build_prompt_details(ReadingRequest(prompt="  ", **base))
    assert system == expected["system"] + system_suffix
    assert full == expected["without_prompt"] + prompt_suffix


def test_golden_fixture_covers_every_reading_type():
    assert set(READING_TYPES) | {GOLDEN["unknown_type"]} == set(GOLDEN["readings"])
