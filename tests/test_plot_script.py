import json
import subprocess
import sys
from pathlib import Path


def test_plot_script_renders_example_data(tmp_path: Path) -> None:
    repo_root = Path(__file__).resolve().parents[1]
    output = tmp_path / "out" / "pca.png"

    result = subprocess.run(
        [
            sys.executable,
            "scripts/plot_pca.py",
            "--pca",
            "data/example/pca.tsv",
            "--populations",
            "data/example/populations.tsv",
            "--profile",
            "pc1_pc2_highlight",
            "--flip",
            "PC1",
            "--output",
            str(output),
            "--log-level",
            "WARNING",
        ],
        cwd=repo_root,
        text=True,
        capture_output=True,
        check=True,
    )

    payload = json.loads(result.stdout)
    assert payload["profile"] == "pc1_pc2_highlight"
    assert payload["joined_records"] == 20
    assert payload["foreground_records"] == 3
    assert payload["legend_entries"] == ["Loschbour", "Stuttgart", "MA1"]
    assert output.exists()


def test_plot_script_exits_nonzero_on_parse_error(tmp_path: Path) -> None:
    repo_root = Path(__file__).resolve().parents[1]
    broken = tmp_path / "pca.tsv"
    broken.write_text("Individual\tPC1\tPC2\tPC3\tPC4\tPopulation\na\t0.1\tx\t0.3\t0.4\tFrench\n")

    result = subprocess.run(
        [
            sys.executable,
            "scripts/plot_pca.py",
            "--pca",
            str(broken),
            "--populations",
            "data/example/populations.tsv",
            "--output",
            str(tmp_path / "pca.png"),
        ],
        cwd=repo_root,
        text=True,
        capture_output=True,
    )

    assert result.returncode == 1
    assert "line 2" in result.stderr
    assert "PC2" in result.stderr
    assert not (tmp_path / "pca.png").exists()


def test_plot_script_reports_non_utf8_input_without_traceback(tmp_path: Path) -> None:
    repo_root = Path(__file__).resolve().parents[1]
    broken = tmp_path / "pca.tsv"
    broken.write_bytes(
        b"Individual\tPC1\tPC2\tPC3\tPC4\tPopulation\n"
        b"a\t0.1\t0.2\t0.3\t0.4\tFr\xffench\n"
    )

    result = subprocess.run(
        [
            sys.executable,
            "scripts/plot_pca.py",
            "--pca",
            str(broken),
            "--populations",
            "data/example/populations.tsv",
            "--output",
            str(tmp_path / "pca.png"),
        ],
        cwd=repo_root,
        text=True,
        capture_output=True,
    )

    assert result.returncode == 1
    assert "not valid UTF-8 text" in result.stderr
    assert str(broken) in result.stderr
    assert "Traceback" not in result.stderr
