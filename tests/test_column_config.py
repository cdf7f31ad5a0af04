from task_app.core import column_config
from task_app.core.column_config import get_columns, load_column_sets


def test_column_sets_load():
    sets = load_column_sets()
    assert "table" in sets and "core" in sets and "overdue" in sets
    assert isinstance(get_columns("table"), list)
    assert get_columns("missing") == []


def test_column_sets_yaml_override(tmp_path, monkeypatch):
    monkeypatch.setattr(column_config, "_CACHE", None)
    (tmp_path / "columns.yaml").write_text("sets:\n  table:\n    - number\n    - title\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["table"] == ["number", "title"]
    assert "created_at" in sets["core"]


def test_column_sets_fallback_without_yaml(tmp_path, monkeypatch):
    monkeypatch.setattr(column_config, "_CACHE", None)
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["overdue"][-1] == "due_date"
