import logging
from typing import NewType

import numpy as np

from countbase.config import EPS
from countbase.errors import EmptyVocabularyError, ZeroMarginalError

logger = logging.getLogger(__name__)

# 単語ID 行列のインデックスや出現回数と混ざらないように型を分けておく
WordId = NewType("WordId", int)


# text文字列の単語を単語IDに変換(文字列からコーパスを作成)
def preprocess(text):
    text = text.lower()
    # ピリオドも1つの単語として扱う
    text = text.replace('.', ' .')
    # 連続した空白で空文字の単語ができないようにsplit()を使う
    words = text.split()

    word_to_id = {}
    id_to_word = {}
    for word in words:
        if word not in word_to_id:
            new_id = WordId(len(word_to_id))
            word_to_id[word] = new_id
            id_to_word[new_id] = word

    corpus = np.array([word_to_id[w] for w in words], dtype=np.int64)

    return corpus, word_to_id, id_to_word


def build_co_occurrence(corpus, window_size=1, vocab_size=None):
    """Count how often each word appears within ``window_size`` of another.

    ``co_matrix[i, j]`` is the number of times word ``j`` was seen within the
    window of an occurrence of word ``i``. ``vocab_size`` defaults to
    ``max(corpus) + 1``.
    """
    corpus = np.asarray(corpus, dtype=np.int64)
    if corpus.ndim != 1:
        raise ValueError("corpus must be a 1-D sequence of word ids")
    corpus_size = len(corpus)
    if corpus_size == 0:
        raise EmptyVocabularyError("cannot count co-occurrence in an empty corpus")
    if window_size < 0:
        raise ValueError("window_size must be >= 0, got %d" % window_size)
    if corpus.min() < 0:
        raise ValueError("word ids must be non-negative")

    min_vocab_size = int(corpus.max()) + 1
    if vocab_size is None:
        vocab_size = min_vocab_size
    elif vocab_size < min_vocab_size:
        raise ValueError(
            "vocab_size %d is too small for word id %d" % (vocab_size, min_vocab_size - 1)
        )

    co_matrix = np.zeros((vocab_size, vocab_size), dtype=np.int64)

    for idx, word_id in enumerate(corpus):
        for i in range(1, window_size + 1):
            left_idx = idx - i
            right_idx = idx + i

            if left_idx >= 0:
                left_word_id = corpus[left_idx]
                co_matrix[word_id, left_word_id] += 1

            if right_idx < corpus_size:
                right_word_id = corpus[right_idx]
                co_matrix[word_id, right_word_id] += 1

    logger.debug("co-occurrence matrix %s from %d words", co_matrix.shape, corpus_size)
    return co_matrix


# 正の相互情報量
def ppmi(C, verbose=False, eps=EPS):
    C = np.asarray(C)
    if C.ndim != 2 or C.shape[0] != C.shape[1]:
        raise ValueError("co-occurrence matrix must be square, got shape %s" % (C.shape,))
    if C.size == 0:
        raise EmptyVocabularyError("cannot compute PPMI of an empty matrix")
    if np.any(C < 0):
        raise ValueError("co-occurrence counts must be non-negative")

    # 大きなコーパスで C[i, j] * N がオーバーフローしないようにfloat64で計算する
    C = C.astype(np.float64)
    # N : 共起の総数
    N = np.sum(C)
    # S : 単語ごとの共起回数の合計
    S = np.sum(C, axis=0)

    zero_ids = np.flatnonzero(S == 0)
    if len(zero_ids) > 0:
        raise ZeroMarginalError(zero_ids.tolist())

    vocab_size = C.shape[0]
    M = np.zeros(C.shape, dtype=np.float32)
    step = max(1, vocab_size // 10)

    for i in range(vocab_size):
        pmi = np.log2(C[i] * N / (S[i] * S) + eps)
        # 負の値は0にする
        M[i] = np.maximum(0, pmi)

        # verbose : 進行状況を出力するかのフラグ
        if verbose and ((i + 1) % step == 0 or i + 1 == vocab_size):
            logger.info("%.1f%% done", 100 * (i + 1) / vocab_size)

    return M


def cosine_similarity(x, y, eps=EPS):
    # それぞれのベクトルを正規化してから内積をとる
    # 同じ方向を向いていると1、直交していると0になる
    x = np.asarray(x)
    y = np.asarray(y)
    nx = x / (np.sqrt(np.sum(x ** 2)) + eps)
    ny = y / (np.sqrt(np.sum(y ** 2)) + eps)
    return float(np.dot(nx, ny))


def most_similar(query, word_to_id, id_to_word, word_matrix):
    """Rank every other word by cosine similarity to ``query``.

    Returns a list of ``(word, score)`` pairs, highest score first. Equal
    scores keep ascending word id order. An unknown query gives ``[]``.
    """
    if query not in word_to_id:
        logger.debug("%s is not found", query)
        return []

    query_id = word_to_id[query]
    query_vec = word_matrix[query_id]

    # コサイン類似度の算出
    vocab_size = len(id_to_word)
    similarity = np.zeros(vocab_size)
    for i in range(vocab_size):
        similarity[i] = cosine_similarity(word_matrix[i], query_vec)

    # argsortは昇順なので-1をかけて降順にする
    # 同じ値のときに単語IDの順番が崩れないよう安定ソートを使う
    result = []
    for i in np.argsort(-similarity, kind="stable"):
        i = int(i)
        if i == query_id:
            continue
        result.append((id_to_word[i], float(similarity[i])))

    return result
