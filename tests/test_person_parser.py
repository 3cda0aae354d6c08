import pytest

from owner_resolution import config
from owner_resolution.models import (
    EMPTY_AFTER_AFFIX_REMOVAL,
    FIRST_LAST,
    LAST_FIRST,
    SINGLE_TOKEN_NO_FALLBACK,
    UNABLE_TO_CLASSIFY_PERSON,
    Person,
    Reject,
)
from owner_resolution.person_parser import (
    NameCandidate,
    ScoringContext,
    build_candidates,
    parse_person,
    score_candidate,
    title_case,
)


def test_prefix_and_suffix_extraction():
    person = parse_person("DR JOHN SMITH JR")

    assert person == Person(prefix_name="Dr", first_name="John", last_name="Smith", suffix_name="Jr")


@pytest.mark.parametrize(
    "raw, first, middle, last",
    [
        ("SMITH JOHN R", "John", "R", "Smith"),
        ("JOHN ROBERT SMITH", "John", "Robert", "Smith"),
        ("SMITH, MARIO", "Mario", None, "Smith"),
        ("JOHN VAN DYKE", "John", None, "Van Dyke"),
        ("VAN DYKE, JOHN", "John", None, "Van Dyke"),
        ("O'BRIEN PATRICK", "Patrick", None, "O'Brien"),
        ("Smith John", "John", None, "Smith"),
        ("JOSÉ GARCÍA", "José", None, "García"),
        ("MUÑOZ, JOSÉ LUIS", "José", "Luis", "Muñoz"),
    ],
)
def test_name_order_inference(raw, first, middle, last):
    person = parse_person(raw)

    assert isinstance(person, Person)
    assert (person.first_name, person.middle_name, person.last_name) == (first, middle, last)


@pytest.mark.parametrize("raw", ["SMITH JR, JOHN", "SMITH JR JOHN", "SMITH JOHN JR MD"])
def test_suffix_positions(raw):
    person = parse_person(raw)

    assert (person.first_name, person.last_name, person.suffix_name) == ("John", "Smith", "Jr")


def test_prefix_after_comma():
    person = parse_person("SMITH, DR JOHN")

    assert (person.prefix_name, person.first_name, person.last_name) == ("Dr", "John", "Smith")


def test_single_token_uses_carried_surname():
    assert parse_person("MARY", carried_surname="Smith") == Person(first_name="Mary", last_name="Smith")


def test_single_token_without_surname_is_rejected():
    assert parse_person("MARY") == Reject(SINGLE_TOKEN_NO_FALLBACK, "MARY")


@pytest.mark.parametrize("raw", ["MR", "JR SR", "MRS III"])
def test_only_affixes_is_rejected(raw):
    assert parse_person(raw) == Reject(EMPTY_AFTER_AFFIX_REMOVAL, raw)


def test_initials_only_is_rejected():
    assert parse_person("J R") == Reject(UNABLE_TO_CLASSIFY_PERSON, "J R")


def test_initial_surname_is_replaced_by_carried_surname():
    person = parse_person("JANE M", carried_surname="Smith")

    assert (person.first_name, person.middle_name, person.last_name) == ("Jane", "M", "Smith")


def test_tie_goes_to_last_first():
    person = parse_person("DAVID JOHN")
    assert (person.first_name, person.last_name) == ("John", "David")

    person = parse_person("DAVID JOHN", tie_break=FIRST_LAST)
    assert (person.first_name, person.last_name) == ("David", "John")


def test_noise_tokens_are_dropped():
    person = parse_person("SMITH JOHN TTEE")
    assert (person.first_name, person.last_name) == ("John", "Smith")


def test_share_annotation_is_dropped():
    person = parse_person("SMITH JOHN (50%)")
    assert (person.first_name, person.last_name) == ("John", "Smith")


def test_score_candidate_uses_weight_table():
    context = ScoringContext()
    candidate = NameCandidate(order=FIRST_LAST, first="JOHN", last="SMITH")

    assert score_candidate(candidate, context) == 5.0
    assert score_candidate(candidate, context, {"nontrivial_first": 1.0}) == 1.0


def test_score_candidate_features():
    context = ScoringContext(carried_surname="Smith", preferred_order=LAST_FIRST)
    candidate = NameCandidate(order=LAST_FIRST, first="J", last="SMITH")

    # nontrivial_last + carried_surname_match + preferred_order + initial_first
    assert score_candidate(candidate, context) == 2.0 + 1.5 + 0.5 - 2.0


def test_affix_as_name_penalty():
    candidate = NameCandidate(order=FIRST_LAST, first="JOHN", last="ESQ")
    weights = config.SCORE_WEIGHTS

    assert score_candidate(candidate, ScoringContext()) == (
        weights["nontrivial_first"] + weights["nontrivial_last"] + weights["common_first_name"] + weights["affix_as_name"]
    )


def test_build_candidates_keeps_particles_with_surname():
    first_last, last_first = build_candidates(["MARIA", "DE", "LA", "CRUZ"])

    assert first_last == NameCandidate(order=FIRST_LAST, first="MARIA", last="DE LA CRUZ")
    assert last_first == NameCandidate(order=LAST_FIRST, first="DE", last="MARIA", middle=("LA", "CRUZ"))


def test_leading_particles_join_surname_in_last_first():
    _, last_first = build_candidates(["DE", "LA", "CRUZ", "MARIA"])

    assert last_first == NameCandidate(order=LAST_FIRST, first="MARIA", last="DE LA CRUZ")


def test_first_name_as_surname_penalty():
    person = parse_person("JOHN ROBERT SMITH")

    assert (person.first_name, person.middle_name, person.last_name) == ("John", "Robert", "Smith")


def test_title_case():
    assert title_case("O'BRIEN-SMITH") == "O'Brien-Smith"
    assert title_case("mary jane") == "Mary Jane"


def test_parse_is_pure():
    assert parse_person("SMITH JOHN R") == parse_person("SMITH JOHN R")
