import numpy as np
import pytest

from countbase import ppmi, reduce_dimensions, plot_word_vectors, most_similar


def test_full_svd_shape(toy):
    _, _, _, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=2)

    assert U.shape == (7, 2)


def test_wordvec_size_is_clamped_to_vocab(toy):
    _, _, _, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=100)

    assert U.shape == (7, 7)
    # Uは直交行列
    assert np.allclose(U.T @ U, np.eye(7), atol=1e-6)


def test_randomized_svd(toy):
    _, _, _, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=3, randomized=True, random_state=0)

    assert U.shape == (7, 3)
    assert np.isfinite(U).all()


def test_bad_wordvec_size(toy):
    _, _, _, C = toy

    with pytest.raises(ValueError):
        reduce_dimensions(ppmi(C), wordvec_size=0)


def test_svd_vectors_work_with_most_similar(toy):
    _, word_to_id, id_to_word, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=3)

    result = most_similar("you", word_to_id, id_to_word, U)

    assert len(result) == 6


def test_plot_word_vectors(toy):
    import matplotlib.pyplot as plt

    _, word_to_id, _, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=2)
    fig, ax = plt.subplots()

    returned = plot_word_vectors(word_to_id, U, ax=ax)

    assert returned is ax
    assert {t.get_text() for t in ax.texts} == set(word_to_id)
    plt.close(fig)


def test_plot_needs_two_dimensions(toy):
    _, word_to_id, _, C = toy
    U = reduce_dimensions(ppmi(C), wordvec_size=1)

    with pytest.raises(ValueError):
        plot_word_vectors(word_to_id, U)
