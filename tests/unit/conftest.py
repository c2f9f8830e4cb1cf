import json

import pytest


@pytest.fixture
def profile(tmp_path):
    """A profile directory with a template and a config pointing at an empty reports root."""
    profile_dir = tmp_path / "profile"
    docs_dir = tmp_path / "reports"
    profile_dir.mkdir()
    docs_dir.mkdir()
    (profile_dir / "template.md").write_text(
        "# Week {{.Week}}\n\n{{.WeekStart}} - {{.WeekEnd}}\n", encoding="utf-8"
    )
    (profile_dir / "config.json").write_text(
        json.dumps({"docs_dir": str(docs_dir), "typora_path": "/bin/typora"}), encoding="utf-8"
    )
    return profile_dir
