class QuizSessionError(Exception):
    pass


class UnknownCategoryError(QuizSessionError):
    pass


class InvalidAnswerOptionError(QuizSessionError):
    pass
