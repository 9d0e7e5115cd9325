"""Quiz aggregate: the "which shoe are you" style quiz.

A quiz owns its questions and their options. Each option may point at a
product; answering a question casts a vote for that product.
"""

from protean.exceptions import ValidationError
from protean.fields import HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.exceptions import InvalidArgument
from storefront.quiz.scoring import recommend_product


@storefront.entity(part_of="Quiz", schema_name="quiz_questions")
class QuizQuestion:
    question: Text(required=True)
    display_order: Integer(required=True, min_value=1)


@storefront.entity(part_of="Quiz", schema_name="quiz_options")
class QuizOption:
    question_id: Identifier(required=True)
    text: Text(required=True)
    product_id: Identifier()  # Options without a product cast no vote
    display_order: Integer(required=True, min_value=1)


@storefront.aggregate(schema_name="quizzes")
class Quiz:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    questions: HasMany(QuizQuestion)
    options: HasMany(QuizOption)

    @classmethod
    def create(cls, name, description, questions=None):
        """Build a quiz from nested question data.

        ``questions`` is a list of ``{"question": str, "options": [{"text": str,
        "product_id": str | None}]}``; display order follows list order.
        """
        quiz = cls(name=name, description=description)
        for q_index, question_data in enumerate(questions or [], start=1):
            options = question_data.get("options") or []
            if not options:
                raise ValidationError({"options": [f"Question {q_index} must have at least one option"]})

            question = QuizQuestion(question=question_data["question"], display_order=q_index)
            quiz.add_questions(question)
            for o_index, option_data in enumerate(options, start=1):
                quiz.add_options(
                    QuizOption(
                        question_id=question.id,
                        text=option_data["text"],
                        product_id=option_data.get("product_id"),
                        display_order=o_index,
                    )
                )
        return quiz

    def structure(self):
        """Questions in display order, each paired with its options in display order."""
        return [
            (
                question,
                sorted(
                    (o for o in self.options if str(o.question_id) == str(question.id)),
                    key=lambda o: o.display_order,
                ),
            )
            for question in sorted(self.questions, key=lambda q: q.display_order)
        ]

    def option_for(self, question_id, option_id):
        option = next(
            (o for o in self.options if str(o.id) == str(option_id) and str(o.question_id) == str(question_id)),
            None,
        )
        if option is None:
            raise InvalidArgument({"answers": [f"Option {option_id} does not belong to question {question_id}"]})
        return option

    def recommend(self, answers):
        """Score an ordered list of ``(question_id, option_id)`` answers.

        Each question votes once. Answering a question again replaces the
        earlier choice but keeps the question's place in answer order.
        """
        latest = {}
        for question_id, option_id in answers:
            latest[str(question_id)] = self.option_for(question_id, option_id)
        return recommend_product(option.product_id for option in latest.values())
