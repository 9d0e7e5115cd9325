"""Tests for the Quiz aggregate structure and scoring of answers."""

import pytest
from protean.exceptions import ValidationError
from storefront.exceptions import InvalidArgument
from storefront.quiz.quiz import Quiz


def _make_quiz():
    return Quiz.create(
        name="Which Dino Kick Are You?",
        description="Find your perfect prehistoric pair!",
        questions=[
            {
                "question": "What's your favorite dinosaur?",
                "options": [
                    {"text": "T-Rex", "product_id": "p1"},
                    {"text": "Velociraptor", "product_id": "p2"},
                ],
            },
            {
                "question": "How would you describe your style?",
                "options": [
                    {"text": "Bold", "product_id": "p1"},
                    {"text": "Undecided", "product_id": None},
                    {"text": "Sporty", "product_id": "p2"},
                ],
            },
        ],
    )


def _answer(quiz, question_index, option_index):
    question, options = quiz.structure()[question_index]
    return question.id, options[option_index].id


class TestQuizStructure:
    def test_questions_are_ordered_from_one(self):
        quiz = _make_quiz()
        structure = quiz.structure()
        assert [q.display_order for q, _ in structure] == [1, 2]
        assert structure[0][0].question == "What's your favorite dinosaur?"

    def test_options_belong_to_their_question(self):
        quiz = _make_quiz()
        first, second = quiz.structure()
        assert [o.text for o in first[1]] == ["T-Rex", "Velociraptor"]
        assert [o.text for o in second[1]] == ["Bold", "Undecided", "Sporty"]
        assert all(o.question_id == second[0].id for o in second[1])

    def test_options_are_ordered(self):
        quiz = _make_quiz()
        _, options = quiz.structure()[1]
        assert [o.display_order for o in options] == [1, 2, 3]

    def test_question_without_options_is_rejected(self):
        with pytest.raises(ValidationError):
            Quiz.create(name="Empty", description="No options", questions=[{"question": "?", "options": []}])


class TestQuizRecommendation:
    def test_recommend_plurality(self):
        quiz = _make_quiz()
        answers = [_answer(quiz, 0, 1), _answer(quiz, 1, 2)]
        assert quiz.recommend(answers) == "p2"

    def test_recommend_tie_goes_to_first_answer(self):
        quiz = _make_quiz()
        answers = [_answer(quiz, 0, 1), _answer(quiz, 1, 0)]
        assert quiz.recommend(answers) == "p2"

    def test_option_without_product_abstains(self):
        quiz = _make_quiz()
        answers = [_answer(quiz, 0, 0), _answer(quiz, 1, 1)]
        assert quiz.recommend(answers) == "p1"

    def test_option_from_another_question_is_rejected(self):
        quiz = _make_quiz()
        first_question, _ = quiz.structure()[0]
        _, second_options = quiz.structure()[1]
        with pytest.raises(InvalidArgument):
            quiz.recommend([(first_question.id, second_options[0].id)])

    def test_repeated_question_votes_once(self):
        quiz = _make_quiz()
        answers = [_answer(quiz, 1, 2), _answer(quiz, 0, 0), _answer(quiz, 0, 0)]
        assert quiz.recommend(answers) == "p2"

    def test_reanswering_replaces_earlier_choice(self):
        quiz = _make_quiz()
        answers = [_answer(quiz, 0, 0), _answer(quiz, 1, 1), _answer(quiz, 0, 1)]
        assert quiz.recommend(answers) == "p2"
