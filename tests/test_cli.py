"""Tests for the bpetok command line."""

from bpetok.cli import main

from conftest import EOS_ID, MERGED_IDS


def test_encode(artifact_path, capsys):
    assert main(["--tokenizer", str(artifact_path), "encode", "hello world"]) == 0
    ids = [MERGED_IDS["hello"], MERGED_IDS["Ġworld"], EOS_ID, EOS_ID]
    assert capsys.readouterr().out.split() == [str(i) for i in ids]


def test_encode_no_special(artifact_path, capsys):
    main(["-t", str(artifact_path), "encode", "hello", "--no-special"])
    assert capsys.readouterr().out.strip() == str(MERGED_IDS["hello"])


def test_decode(artifact_path, capsys):
    args = ["-t", str(artifact_path), "decode", str(MERGED_IDS["hello"]), str(EOS_ID)]
    assert main(args) == 0
    assert capsys.readouterr().out == "hello\n"


def test_tokenize(artifact_path, capsys):
    main(["-t", str(artifact_path), "tokenize", "hello world\t[laugh]"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"[{MERGED_IDS['hello']}] hello",
        f"[{MERGED_IDS['Ġworld']}]  world",
        "[9] \\u0009",
        "[50257] [laugh]",
    ]


def test_info(artifact_path, capsys):
    main(["-t", str(artifact_path), "info"])
    out = capsys.readouterr().out
    assert f"merges: {len(MERGED_IDS)}" in out
    assert "added tokens: 2" in out


def test_missing_artifact(tmp_path, capsys):
    assert main(["-t", str(tmp_path / "nope.json"), "info"]) == 1
    assert "error" in capsys.readouterr().err
