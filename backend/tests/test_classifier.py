import math

import pytest

from models.schemas.quiz import QuizAnswer
from models.schemas.traits import TRAITS, Trait, zero_vector
from services.career_profiles import CAREER_PROFILES
from services.quiz_catalog import CUSTOM_ANSWER_BONUS, OPTION_TRAIT_RULES
from services.classifier import (
    classify_career,
    classify_to_prediction,
    cosine_similarity,
    encode_answers,
    rescale_confidence,
    round_confidence,
)


def _answer(text: str, is_custom: bool = False, question_id: int = 1) -> QuizAnswer:
    return QuizAnswer(question_id=question_id, answer=text, is_custom=is_custom)


class TestEncodeAnswers:
    def test_empty_answers_give_zero_vector(self):
        vec = encode_answers([])
        assert set(vec) == set(TRAITS)
        assert all(v == 0 for v in vec.values())

    def test_all_traits_always_present(self):
        vec = encode_answers([_answer("Dizajni dhe estetika")])
        assert len(vec) == 10
        assert vec[Trait.VISUAL] == 3
        assert vec[Trait.CREATIVE] == 3
        assert vec[Trait.ANALYTICAL] == 0

    def test_first_matching_rule_wins(self):
        # "hibrid" is declared before "studio krijuese"
        vec = encode_answers([_answer("Hibrid, por preferoj një studio krijuese")])
        assert vec[Trait.ORGANIZED] == 1
        assert vec[Trait.SOCIAL] == 1
        assert vec[Trait.ANALYTICAL] == 1
        assert vec[Trait.CREATIVE] == 0
        assert vec[Trait.VISUAL] == 0

    def test_matching_is_case_insensitive(self):
        vec = encode_answers([_answer("ZGJIDHJA E PROBLEMEVE KOMPLEKSE TEKNIKE")])
        assert vec[Trait.ANALYTICAL] == 3
        assert vec[Trait.TECHNICAL] == 2
        assert vec[Trait.RESEARCH] == 1

    def test_unmatched_text_contributes_nothing(self):
        vec = encode_answers([_answer("I like turtles"), _answer("asgjë nga këto")])
        assert vec == zero_vector()

    def test_custom_answer_bonus_without_match(self):
        vec = encode_answers([_answer("Dua të punoj me kafshë", is_custom=True)])
        assert vec[Trait.RESEARCH] == 1
        assert vec[Trait.ENTREPRENEURIAL] == 1
        others = [v for t, v in vec.items() if t not in (Trait.RESEARCH, Trait.ENTREPRENEURIAL)]
        assert all(v == 0 for v in others)

    def test_custom_answer_bonus_adds_to_rule_match(self):
        vec = encode_answers([_answer("Punoj më mirë në një studio krijuese", is_custom=True)])
        assert vec[Trait.CREATIVE] == 3
        assert vec[Trait.VISUAL] == 2
        assert vec[Trait.RESEARCH] == 1
        assert vec[Trait.ENTREPRENEURIAL] == 1

    def test_first_option_totals(self, first_option_answers):
        vec = encode_answers(first_option_answers)
        assert vec[Trait.ANALYTICAL] == 20
        assert vec[Trait.TECHNICAL] == 16
        assert vec[Trait.RESEARCH] == 12
        assert vec[Trait.ORGANIZED] == 3
        assert vec[Trait.LEADERSHIP] == 1
        assert vec[Trait.ENTREPRENEURIAL] == 1
        assert vec[Trait.CARING] == 0

    def test_accumulation_is_additive(self, answers_for):
        answers = answers_for(2)
        once = encode_answers(answers)
        twice = encode_answers(answers + answers)
        assert twice == {t: 2 * v for t, v in once.items()}


class TestCosineSimilarity:
    def test_zero_vector_is_exactly_zero(self):
        other = {**zero_vector(), Trait.SOCIAL: 3.0}
        score = cosine_similarity(zero_vector(), other)
        assert score == 0.0
        assert not math.isnan(score)
        assert cosine_similarity(other, zero_vector()) == 0.0
        assert cosine_similarity(zero_vector(), zero_vector()) == 0.0

    def test_identical_vectors(self):
        vec = {**zero_vector(), Trait.ANALYTICAL: 3.0, Trait.TECHNICAL: 1.0}
        assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        a = {**zero_vector(), Trait.ANALYTICAL: 2.0}
        b = {**zero_vector(), Trait.CARING: 5.0}
        assert cosine_similarity(a, b) == 0.0

    def test_scale_invariant(self):
        a = {**zero_vector(), Trait.ANALYTICAL: 1.0, Trait.SOCIAL: 2.0}
        b = {**zero_vector(), Trait.ANALYTICAL: 3.0, Trait.CARING: 1.0}
        scaled = {t: 10 * v for t, v in a.items()}
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(scaled, b))

    def test_partial_vectors_treat_missing_as_zero(self):
        a = {Trait.ANALYTICAL: 1.0}
        b = {**zero_vector(), Trait.ANALYTICAL: 4.0}
        assert cosine_similarity(a, b) == pytest.approx(1.0)


class TestClassifyCareer:
    def test_returns_every_profile_sorted(self, first_option_answers):
        ranked = classify_career(first_option_answers)
        assert len(ranked) == len(CAREER_PROFILES) == 10
        scores = [r.raw_score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_analytical_answers_rank_software_developer_first(self, first_option_answers):
        ranked = classify_career(first_option_answers)
        assert ranked[0].career == "Zhvillues Software"
        assert ranked[1].career == "Shkencëtar të Dhënash"
        assert ranked[2].career == "Inxhinier / Arkitekt"
        assert ranked[0].confidence == 1.0

    def test_relative_confidence(self, first_option_answers):
        ranked = classify_career(first_option_answers)
        for r in ranked:
            assert r.confidence == pytest.approx(r.raw_score / ranked[0].raw_score)

    def test_ties_keep_registry_order(self):
        ranked = classify_career([])
        assert [r.career for r in ranked] == [p.name for p in CAREER_PROFILES]
        assert all(r.raw_score == 0.0 for r in ranked)
        assert all(r.confidence == 0.0 for r in ranked)

    def test_deterministic(self, answers_for):
        answers = answers_for(1)
        assert classify_career(answers) == classify_career(answers)


class TestClassifyToPrediction:
    def test_empty_answers_floor_confidence(self):
        result = classify_to_prediction([])
        assert result.primary_career == CAREER_PROFILES[0].name
        assert result.confidence == 0.52
        assert [a.confidence for a in result.alternatives] == [0.0, 0.0]
        assert len(result.alternatives) == 2

    def test_first_option_prediction(self, first_option_answers):
        result = classify_to_prediction(first_option_answers)
        assert result.primary_career == "Zhvillues Software"
        assert result.confidence == 0.97
        assert result.alternatives[0].career == "Shkencëtar të Dhënash"
        assert result.alternatives[0].confidence == 0.92
        assert result.alternatives[1].career == "Inxhinier / Arkitekt"
        assert result.alternatives[1].confidence == 0.76
        assert result.description == CAREER_PROFILES[0].description
        assert result.learning_path == list(CAREER_PROFILES[0].learning_path)

    @pytest.mark.parametrize("option_index", [0, 1, 2, 3])
    @pytest.mark.parametrize("n_answers", [0, 1, 3, 5, 10])
    def test_confidence_bounds(self, answers_for, option_index, n_answers):
        result = classify_to_prediction(answers_for(option_index)[:n_answers])
        assert 0.52 <= result.confidence <= 0.97
        for alt in result.alternatives:
            assert 0.0 <= alt.confidence <= result.confidence

    def test_deterministic(self, answers_for):
        answers = answers_for(3)
        first = classify_to_prediction(answers)
        second = classify_to_prediction(answers)
        assert first.model_dump_json() == second.model_dump_json()

    def test_serializes_with_camel_case_keys(self, first_option_answers):
        data = classify_to_prediction(first_option_answers).model_dump(by_alias=True)
        assert set(data) == {"primaryCareer", "confidence", "description", "alternatives", "learningPath"}
        assert set(data["alternatives"][0]) == {"career", "confidence", "description"}


class TestConfidenceScaling:
    def test_rescale_bounds(self):
        assert rescale_confidence(0.0) == 0.52
        assert rescale_confidence(1.0) == 0.97
        assert rescale_confidence(0.5) == pytest.approx(0.76)

    def test_round_half_up(self):
        assert round_confidence(0.125) == 0.13
        assert round_confidence(0.375) == 0.38
        assert round_confidence(0.994) == 0.99
        assert round_confidence(0.0) == 0.0


class TestRegistriesAreReadOnly:
    def test_custom_bonus_cannot_be_changed(self):
        with pytest.raises(TypeError):
            CUSTOM_ANSWER_BONUS[Trait.CARING] = 5
        assert dict(CUSTOM_ANSWER_BONUS) == {Trait.RESEARCH: 1, Trait.ENTREPRENEURIAL: 1}

    def test_rule_contributions_cannot_be_changed(self):
        for rule in OPTION_TRAIT_RULES:
            with pytest.raises(TypeError):
                rule.contribution[Trait.ANALYTICAL] = 9

    def test_profile_traits_cannot_be_changed(self):
        for profile in CAREER_PROFILES:
            with pytest.raises(TypeError):
                profile.traits[Trait.SOCIAL] = 7
        assert dict(CAREER_PROFILES[0].traits) == {
            Trait.ANALYTICAL: 3.0,
            Trait.TECHNICAL: 3.0,
            Trait.RESEARCH: 2.0,
            Trait.ORGANIZED: 1.0,
        }

    def test_profile_dump_still_plain_dict(self):
        data = CAREER_PROFILES[0].model_dump()
        assert isinstance(data["traits"], dict)
