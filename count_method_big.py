import argparse
import logging

from countbase import preprocess, build_co_occurrence, ppmi, most_similar
from countbase.config import DEFAULT_TOP, DEFAULT_WINDOW_SIZE, DEFAULT_WORDVEC_SIZE
from countbase.svd import reduce_dimensions


def main():
    parser = argparse.ArgumentParser(description="Count based word vectors for a text file")
    parser.add_argument("path", help="Text file to read the corpus from")
    parser.add_argument(
        "--window-size",
        type=int,
        default=DEFAULT_WINDOW_SIZE,
        help="Number of words on each side counted as context (default: %d)" % DEFAULT_WINDOW_SIZE
    )
    parser.add_argument(
        "--wordvec-size",
        type=int,
        default=DEFAULT_WORDVEC_SIZE,
        help="Length of the word vectors after SVD (default: %d)" % DEFAULT_WORDVEC_SIZE
    )
    parser.add_argument(
        "--randomized",
        action="store_true",
        help="Use truncated randomized SVD instead of the full SVD"
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP,
        help="Number of similar words to show per query (default: %d)" % DEFAULT_TOP
    )
    parser.add_argument(
        "--query",
        nargs="+",
        default=['you', 'year', 'car', 'toyota'],
        help="Words to look up"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    with open(args.path, encoding="utf-8") as f:
        text = f.read()

    corpus, word_to_id, id_to_word = preprocess(text)
    vocab_size = len(word_to_id)
    print("corpus size: %d, vocab size: %d" % (len(corpus), vocab_size))

    # 共起行列
    print("counting co-occurrence ...")
    C = build_co_occurrence(corpus, window_size=args.window_size, vocab_size=vocab_size)
    # ppmi行列
    print("calculating PPMI ...")
    W = ppmi(C, verbose=True)

    # SVD
    print("calculating SVD ...")
    word_vecs = reduce_dimensions(W, wordvec_size=args.wordvec_size, randomized=args.randomized)

    for query in args.query:
        if query not in word_to_id:
            print("%s is not found" % query)
            continue

        print("\n[query] " + query)
        result = most_similar(query, word_to_id, id_to_word, word_vecs)
        for word, score in result[:args.top]:
            print(" %s: %s" % (word, score))


if __name__ == "__main__":
    main()
