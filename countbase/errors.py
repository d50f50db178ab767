class CountBaseError(Exception):
    """Base class for errors raised by countbase."""


class EmptyVocabularyError(CountBaseError, ValueError):
    """The corpus or matrix has no words in it."""


class ZeroMarginalError(CountBaseError, ValueError):
    """Some words never co-occur with anything, so PMI is undefined for them."""

    def __init__(self, word_ids):
        self.word_ids = list(word_ids)
        super().__init__(
            "zero co-occurrence total for word ids %s" % self.word_ids
        )
