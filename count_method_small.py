import argparse
import logging

import numpy as np
import matplotlib.pyplot as plt

from countbase import preprocess, build_co_occurrence, ppmi, cosine_similarity, most_similar
from countbase.config import DEFAULT_TOP
from countbase.svd import reduce_dimensions, plot_word_vectors

text = "You say goodbye and I say hello."


def main():
    parser = argparse.ArgumentParser(description="Count based word vectors on a toy sentence")
    parser.add_argument("--plot", action="store_true", help="Plot the 2-D SVD vectors")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    corpus, word_to_id, id_to_word = preprocess(text)
    print(corpus)
    print(id_to_word)

    C = build_co_occurrence(corpus, window_size=1)
    W = ppmi(C)

    # SVD
    U = reduce_dimensions(W, wordvec_size=len(word_to_id))

    np.set_printoptions(precision=3)
    print(C[0]) # 共起行列
    print(W[0]) # PPMI行列
    print(U[0]) # SVD

    # 次元削減するのに、二次元ベクトルに削減する場合、単に先頭２つの要素を取り出せば良い
    print(U[0, :2])

    c0 = C[word_to_id['you']]
    c1 = C[word_to_id['i']]
    print(cosine_similarity(c0, c1))

    print("\n[query] you")
    for word, score in most_similar('you', word_to_id, id_to_word, C)[:DEFAULT_TOP]:
        print(" %s: %s" % (word, score))

    if args.plot:
        plot_word_vectors(word_to_id, U)
        plt.show()


if __name__ == "__main__":
    main()
