from countbase.config import EPS
from countbase.errors import CountBaseError, EmptyVocabularyError, ZeroMarginalError
from countbase.util import (
    WordId,
    preprocess,
    build_co_occurrence,
    ppmi,
    cosine_similarity,
    most_similar,
)
from countbase.svd import reduce_dimensions, plot_word_vectors

__all__ = [
    "EPS",
    "CountBaseError",
    "EmptyVocabularyError",
    "ZeroMarginalError",
    "WordId",
    "preprocess",
    "build_co_occurrence",
    "ppmi",
    "cosine_similarity",
    "most_similar",
    "reduce_dimensions",
    "plot_word_vectors",
]
