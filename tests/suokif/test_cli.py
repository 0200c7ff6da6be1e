"""Tests for the suokif command-line interface."""

from suokif.suokif_cli import build_parser, main


def write_kif(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestSUOKIFCLIConvert:
    """Test the convert command."""

    def test_convert_to_stdout(self, tmp_path, capsys):
        """Test translating a file and printing the document."""
        kif_file = write_kif(tmp_path, "Animals.kif", "(instance Foo Bar)\n(subclass Bar Baz)\n")

        assert main(["convert", str(kif_file)]) == 0

        out = capsys.readouterr().out
        assert "% This is a translation to TPTP of KB Animals" in out
        assert "fof(kb_Animals_1,axiom,(s__instance(s__Foo,s__Bar)))." in out
        assert "fof(kb_Animals_2,axiom,(s__subclass(s__Bar,s__Baz)))." in out

    def test_convert_to_file(self, tmp_path, capsys):
        """Test writing the document to an output file."""
        kif_file = write_kif(tmp_path, "Test.kif", "(instance Foo Bar)\n")
        output = tmp_path / "out.tptp"

        assert main(["convert", str(kif_file), "-o", str(output), "--kb", "Custom"]) == 0

        assert "fof(kb_Custom_1,axiom," in output.read_text(encoding="utf-8")
        assert "Wrote 1 axioms" in capsys.readouterr().out

    def test_convert_several_files_with_conjecture(self, tmp_path, capsys):
        """Test merging files and appending a question."""
        first = write_kif(tmp_path, "a.kif", "(=> (instance ?X Human) (instance ?X Animal))\n")
        second = write_kif(tmp_path, "b.kif", "(instance Socrates Human)\n")

        exit_code = main([
            "convert", str(first), str(second), "--kb", "Both", "--conjecture", "(instance ?Y Animal)", "--question"
        ])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "fof(kb_Both_2,axiom,(s__instance(s__Socrates,s__Human)))." in out
        assert "fof(prove_from_Both,question,((? [V__Y] : (s__instance(V__Y,s__Animal)))))." in out

    def test_convert_options(self, tmp_path, capsys):
        """Test the option flags."""
        kif_file = write_kif(tmp_path, "opts.kif", '(p 3 "text")\n')

        assert main(["convert", str(kif_file), "--show-numbers", "--remove-strings", "--lang", "tff"]) == 0

        assert "tff(kb_opts_1,axiom,(s__p(3)))." in capsys.readouterr().out

    def test_convert_with_config(self, tmp_path, capsys):
        """Test a run described by a YAML file."""
        write_kif(tmp_path, "Merge.kif", "(instance Foo Bar)\n")
        config_file = tmp_path / "run.yaml"
        config_file.write_text("kb_name: FromConfig\nfiles:\n  - Merge.kif\n", encoding="utf-8")

        assert main(["convert", "--config", str(config_file)]) == 0

        assert "fof(kb_FromConfig_1,axiom,(s__instance(s__Foo,s__Bar)))." in capsys.readouterr().out

    def test_config_with_blank_file_list(self, tmp_path, capsys):
        """Test a configuration whose file list is present but empty."""
        config_file = tmp_path / "blank.yaml"
        config_file.write_text("kb_name: K\nfiles:\noptions:\n", encoding="utf-8")

        assert main(["convert", "-c", str(config_file)]) == 1

        assert "no input files" in capsys.readouterr().err

    def test_config_with_scalar_file_list(self, tmp_path, capsys):
        """Test a configuration whose file list is not a list."""
        config_file = tmp_path / "scalar.yaml"
        config_file.write_text("files: Merge.kif\n", encoding="utf-8")

        assert main(["convert", "-c", str(config_file)]) == 1

        assert "'files' must be a list" in capsys.readouterr().err

    def test_strict_failure(self, tmp_path, capsys):
        """Test that strict mode reports the failure and exits non-zero."""
        kif_file = write_kif(tmp_path, "hol.kif", "(believes John (not (p A)))\n")

        assert main(["convert", str(kif_file), "--strict"]) == 1

        assert "Error:" in capsys.readouterr().err

    def test_missing_input(self, capsys):
        """Test convert without files."""
        assert main(["convert"]) == 1

        assert "no input files" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """Test convert with a file that does not exist."""
        assert main(["convert", str(tmp_path / "nope.kif")]) == 1

        assert "Error:" in capsys.readouterr().err


class TestSUOKIFCLICheck:
    """Test the check command."""

    def test_clean_file(self, tmp_path, capsys):
        """Test checking a well-formed file."""
        kif_file = write_kif(tmp_path, "good.kif", "(instance Foo Bar)\n")

        assert main(["check", str(kif_file)]) == 0

        assert capsys.readouterr().out == ""

    def test_problems_are_listed(self, tmp_path, capsys):
        """Test that each problem is printed with its location."""
        kif_file = write_kif(tmp_path, "bad.kif", "(p ?1)\n(q A))\n")

        assert main(["check", str(kif_file)]) == 1

        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"{kif_file}:1:4: Variable names must start with a letter after '?': ?1",
            f"{kif_file}:2:6: Dangling right parenthesis",
        ]


class TestSUOKIFCLIParser:
    """Test argument parsing."""

    def test_no_command(self, capsys):
        """Test that running without a command prints help and fails."""
        assert main([]) == 1

        assert "usage:" in capsys.readouterr().out

    def test_convert_arguments(self):
        """Test the convert command's arguments."""
        args = build_parser().parse_args(["convert", "a.kif", "--lang", "thf", "--strict"])

        assert args.command == "convert"
        assert args.files == ["a.kif"]
        assert args.lang == "thf"
        assert args.strict
        assert not args.question
