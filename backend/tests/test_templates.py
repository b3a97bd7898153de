import json
from codepad.services.templates import LANGUAGES, load_all_templates, load_template

JUDGE0_IDS = {
    "javascript": 63,
    "python": 71,
    "java": 62,
    "cpp": 54,
    "csharp": 51,
    "go": 60,
}


def test_shipped_templates_load_in_order():
    templates = load_all_templates()
    assert [t.value for t in templates] == LANGUAGES
    for t in templates:
        assert t.judge0_id == JUDGE0_IDS[t.value]
        assert t.default_code.strip()


def test_load_template_reads_camel_case(tmp_path):
    (tmp_path / "ruby.json").write_text(
        json.dumps(
            {
                "value": "ruby",
                "label": "Ruby",
                "judge0Id": 72,
                "description": "hello",
                "defaultCode": "puts 1",
                "exampleInput": "",
                "exampleOutput": "1",
            }
        )
    )
    template = load_template("ruby", tmp_path)
    assert template.judge0_id == 72
    assert template.default_code == "puts 1"
    assert template.model_dump(by_alias=True)["judge0Id"] == 72


def test_missing_template_is_none(tmp_path):
    assert load_template("python", tmp_path) is None


def test_broken_templates_are_none(tmp_path):
    (tmp_path / "bad.json").write_text("{not json")
    (tmp_path / "partial.json").write_text(json.dumps({"value": "partial"}))
    assert load_template("bad", tmp_path) is None
    assert load_template("partial", tmp_path) is None


def test_path_like_names_rejected():
    assert load_template("../python") is None
    assert load_template("") is None


def test_load_all_skips_failures(tmp_path):
    templates = load_all_templates(["python", "cobol"])
    assert [t.value for t in templates] == ["python"]
    assert load_all_templates(templates_dir=tmp_path) == []
