import os

# 画面のない環境でもmatplotlibが動くようにする
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from countbase import preprocess, build_co_occurrence


@pytest.fixture
def toy_text():
    return "You say goodbye and I say hello."


@pytest.fixture
def toy(toy_text):
    corpus, word_to_id, id_to_word = preprocess(toy_text)
    C = build_co_occurrence(corpus, window_size=1)
    return corpus, word_to_id, id_to_word, C


@pytest.fixture
def long_text():
    return (
        "The quick brown fox jumps over the lazy dog. "
        "The dog sleeps and the fox runs. "
        "A lazy fox is still a fox, and a quick dog is still a dog."
    )
