"""Integration tests for file-based compilation with logging."""

import json

import pytest

from yamlresume.contexts.compiling import compile_resume_file
from yamlresume.contexts.compiling.defaults import SAMPLE_RESUME_YAML


@pytest.fixture
def sample_yaml(tmp_path):
    path = tmp_path / "sample.yaml"
    path.write_text(SAMPLE_RESUME_YAML, encoding="utf-8")
    return path


@pytest.mark.integration
def test_compile_writes_json(sample_yaml, tmp_path):
    output_path = tmp_path / "out" / "sample.json"
    result = compile_resume_file(sample_yaml, output_path=output_path, log_dir=tmp_path / "logs")

    assert result.success
    assert result.error is None
    assert result.output_path == output_path
    assert result.theme == "modern"
    assert result.num_sections == 3

    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["pageSize"] == "A4"
    assert document["content"][0]["stack"][0] == {"text": "Hieu Doan", "style": "name"}


@pytest.mark.integration
def test_compile_extended_sections(sample_yaml, tmp_path):
    result = compile_resume_file(
        sample_yaml,
        output_path=tmp_path / "sample.json",
        include_extended_sections=True,
        log_dir=tmp_path / "logs",
    )
    assert result.num_sections == 9


@pytest.mark.integration
def test_compile_writes_log_file(sample_yaml, tmp_path):
    log_dir = tmp_path / "logs"
    compile_resume_file(sample_yaml, output_path=tmp_path / "sample.json", log_dir=log_dir)

    log_text = (log_dir / "compile.log").read_text(encoding="utf-8")
    assert "[compile] Starting to compile sample" in log_text
    assert "compile succeeded" in log_text


@pytest.mark.integration
def test_invalid_input_reported_in_result(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("resume:\n  sections: {}\n", encoding="utf-8")
    output_path = tmp_path / "broken.json"

    result = compile_resume_file(path, output_path=output_path, log_dir=tmp_path / "logs")

    assert not result.success
    assert "resume.info" in result.error
    assert result.output_path is None
    assert not output_path.exists()


@pytest.mark.integration
def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compile_resume_file(tmp_path / "missing.yaml", log_dir=tmp_path / "logs")


@pytest.mark.integration
def test_non_utf8_input_reported_in_result(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"resume:\n  info:\n    name: \xff\xfe\n")
    log_dir = tmp_path / "logs"

    result = compile_resume_file(path, output_path=tmp_path / "latin1.json", log_dir=log_dir)

    assert not result.success
    assert "not valid UTF-8" in result.error
    assert "Failed to compile latin1" in (log_dir / "compile.log").read_text(encoding="utf-8")


@pytest.mark.integration
def test_unknown_theme_logs_warning(tmp_path):
    path = tmp_path / "neon.yaml"
    yaml_text = SAMPLE_RESUME_YAML.replace("resume:\n", "resume:\n  theme: neon\n")
    path.write_text(yaml_text, encoding="utf-8")
    log_dir = tmp_path / "logs"

    result = compile_resume_file(path, output_path=tmp_path / "neon.json", log_dir=log_dir)

    assert result.success
    assert result.theme == "modern"
    assert "Unknown theme 'neon', using 'modern'" in (log_dir / "compile.log").read_text(
        encoding="utf-8"
    )
