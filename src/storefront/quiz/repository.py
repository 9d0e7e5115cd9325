from storefront.domain import storefront
from storefront.quiz.quiz import Quiz


@storefront.repository(part_of=Quiz)
class QuizRepository:
    def all_quizzes(self) -> list[Quiz]:
        return self._dao.query.order_by("name").all().items
