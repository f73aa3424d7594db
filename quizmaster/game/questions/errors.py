class QuestionSourceError(Exception):
    pass


class QuestionSourceNotConfiguredError(QuestionSourceError):
    pass


class QuestionSourceUnavailableError(QuestionSourceError):
    pass


class QuestionPayloadError(QuestionSourceError):
    pass
