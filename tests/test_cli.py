import pytest

from huffarc.cli import main, print_help, print_usage_error


def test_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Использование:" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help(flag, capsys):
    assert main([flag]) == 0
    out = capsys.readouterr().out
    assert "Huffman Archiver" in out
    assert "--decompress <архив.huf>" in out


def test_unknown_command(capsys):
    assert main(["--bogus"]) == 1
    assert "'--bogus'" in capsys.readouterr().err


def test_compress_needs_files(capsys):
    assert main(["--compress", "a.huf"]) == 1
    assert "хотя бы один файл" in capsys.readouterr().err


def test_decompress_needs_exactly_archive(capsys):
    assert main(["--decompress", "a.huf", "extra"]) == 1
    assert "только имя архива" in capsys.readouterr().err


def test_print_help_uses_program_name(capsys):
    print_help("prog")
    out = capsys.readouterr().out
    assert "  prog --compress data.huf file1.txt file2.jpg" in out


def test_print_usage_error_goes_to_stderr(capsys):
    print_usage_error("prog")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "prog --help" in captured.err


@pytest.mark.parametrize("compress_flag, decompress_flag", [("--compress", "--decompress"), ("--c", "--d")])
def test_round_trip(compress_flag, decompress_flag, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    first = b"first file contents, repeated. " * 40
    second = bytes(range(256)) * 3
    (tmp_path / "one.txt").write_bytes(first)
    (tmp_path / "two.bin").write_bytes(second)

    assert main([compress_flag, "pack.huf", "one.txt", "two.bin"]) == 0
    assert "РЕЖИМ СЖАТИЯ" in capsys.readouterr().out

    (tmp_path / "one.txt").unlink()
    (tmp_path / "two.bin").unlink()

    assert main([decompress_flag, "pack.huf"]) == 0
    assert "completed successfully" in capsys.readouterr().out
    assert (tmp_path / "one.txt").read_bytes() == first
    assert (tmp_path / "two.bin").read_bytes() == second


def test_compress_missing_input_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--compress", "pack.huf", "absent.txt"]) == 0
    assert "Problem with open input file absent.txt" in capsys.readouterr().err


def test_decompress_missing_archive_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--decompress", "absent.huf"]) == 0
    assert "absent.huf" in capsys.readouterr().err