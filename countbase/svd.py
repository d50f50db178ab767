import logging

import numpy as np
import matplotlib.pyplot as plt
from sklearn.utils.extmath import randomized_svd

from countbase.config import DEFAULT_WORDVEC_SIZE

logger = logging.getLogger(__name__)


def reduce_dimensions(W, wordvec_size=DEFAULT_WORDVEC_SIZE, randomized=False, random_state=None):
    """Turn the rows of a (PPMI) matrix into dense word vectors with SVD.

    With ``randomized=True`` a truncated SVD is used, which is much faster on a
    large vocabulary. The result has ``min(wordvec_size, vocab_size)`` columns.
    """
    if wordvec_size < 1:
        raise ValueError("wordvec_size must be >= 1, got %d" % wordvec_size)
    W = np.asarray(W, dtype=np.float64)
    if W.ndim != 2 or W.size == 0:
        raise ValueError("expected a non-empty 2-D matrix, got shape %s" % (W.shape,))
    wordvec_size = min(wordvec_size, min(W.shape))

    if randomized:
        # truncated SVD (fast!)
        logger.debug("randomized SVD with %d components", wordvec_size)
        U, S, V = randomized_svd(W, n_components=wordvec_size, n_iter=5, random_state=random_state)
    else:
        # SVD (slow)
        logger.debug("full SVD of %s matrix", W.shape)
        U, S, V = np.linalg.svd(W)

    return U[:, :wordvec_size]


# 各単語を二次元ベクトルでグラフにプロット
def plot_word_vectors(word_to_id, U, ax=None):
    U = np.asarray(U)
    if U.ndim != 2 or U.shape[1] < 2:
        raise ValueError("need at least 2 dimensions to plot, got shape %s" % (U.shape,))
    if ax is None:
        ax = plt.gca()

    for word, word_id in word_to_id.items():
        ax.annotate(word, (U[word_id, 0], U[word_id, 1]))

    ax.scatter(U[:, 0], U[:, 1], alpha=0.5)
    return ax
