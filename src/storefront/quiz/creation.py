"""Quiz creation: command and handler."""

import json

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.quiz.quiz import Quiz


@storefront.command(part_of="Quiz")
class CreateQuiz:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    questions: Text(required=True)  # JSON: [{question, options: [{text, product_id}]}]


@storefront.command_handler(part_of=Quiz)
class CreateQuizHandler:
    @handle(CreateQuiz)
    def create_quiz(self, command):
        questions = json.loads(command.questions) if isinstance(command.questions, str) else command.questions
        quiz = Quiz.create(name=command.name, description=command.description, questions=questions)
        current_domain.repository_for(Quiz).add(quiz)
        return str(quiz.id)
