import sys

import count_method_big
import count_method_small


def test_count_method_big(tmp_path, monkeypatch, capsys, toy_text):
    path = tmp_path / "corpus.txt"
    path.write_text(toy_text, encoding="utf-8")
    monkeypatch.setattr(
        sys, "argv",
        ["count_method_big.py", str(path), "--wordvec-size", "3", "--top", "2", "--query", "you", "car"],
    )

    count_method_big.main()

    out = capsys.readouterr().out
    assert "vocab size: 7" in out
    assert "[query] you" in out
    assert "car is not found" in out


def test_count_method_small(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["count_method_small.py"])

    count_method_small.main()

    out = capsys.readouterr().out
    assert "[query] you" in out
    assert " goodbye: " in out
