import itertools

import pytest

from app.assessment.questions import (
    AI_PIONEER,
    FRAMEWORK_BUILDER,
    MOVEMENT_MAKER,
    PROFILES,
    QUESTIONS,
    STRATEGIC_NARRATOR,
    classify,
)


class TestQuestions:
    def test_five_questions_with_four_options_each(self):
        assert len(QUESTIONS) == 5
        assert all(len(question.options) == 4 for question in QUESTIONS)

    def test_profiles_carry_three_recommendations(self):
        assert [profile.type for profile in PROFILES] == [
            "Strategic Narrator",
            "AI Pioneer",
            "Framework Builder",
            "Movement Maker",
        ]
        for profile in PROFILES:
            assert len(profile.recommendations) == 3
            assert profile.description
            assert profile.cta
            assert profile.emoji


class TestClassify:
    @pytest.mark.parametrize(
        "answers, expected",
        [
            # challenge is answers[1], difference is answers[4]
            ([0, 1, 0, 0, 3], STRATEGIC_NARRATOR),
            ([0, 2, 0, 0, 0], STRATEGIC_NARRATOR),
            ([0, 0, 0, 0, 0], STRATEGIC_NARRATOR),
            ([1, 0, 2, 1, 3], AI_PIONEER),
            ([0, 2, 0, 0, 1], AI_PIONEER),
            ([0, 0, 0, 0, 2], AI_PIONEER),
            ([0, 3, 0, 0, 3], FRAMEWORK_BUILDER),
            ([0, 2, 0, 0, 2], FRAMEWORK_BUILDER),
            ([0, 3, 0, 0, 1], AI_PIONEER),
            ([0, 2, 0, 0, 3], MOVEMENT_MAKER),
            ([3, 2, 3, 3, 3], MOVEMENT_MAKER),
        ],
    )
    def test_first_matching_rule_wins(self, answers, expected):
        assert classify(answers) == expected

    def test_only_challenge_and_difference_answers_matter(self):
        for first, third, fourth in itertools.product(range(4), repeat=3):
            assert classify([first, 2, third, fourth, 3]) == MOVEMENT_MAKER

    def test_every_answer_combination_maps_to_a_known_profile(self):
        for challenge, difference in itertools.product(range(4), repeat=2):
            assert classify([0, challenge, 0, 0, difference]) in PROFILES

    @pytest.mark.parametrize("answers", [[], [0, 1, 2, 3], [0, 1, 2, 3, 0, 1]])
    def test_requires_one_answer_per_question(self, answers):
        with pytest.raises(ValueError) as e:
            classify(answers)

        assert str(e.value) == f"Expected 5 answers, got {len(answers)}"
