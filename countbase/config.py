import numpy as np

# ゼロ除算・log(0)を防ぐための微小値 (float32のマシンイプシロン)
# ppmiとcosine_similarityで共通して使う
EPS = float(np.finfo(np.float32).eps)

# 単語の両サイドの長さ
DEFAULT_WINDOW_SIZE = 1
# most_similarで表示する件数
DEFAULT_TOP = 5
# SVDで削減した後の単語ベクトルの長さ
DEFAULT_WORDVEC_SIZE = 100
