import json
from pathlib import Path

import pytest

from wox_plugin.models import Item
from wox_plugin.results import ResultList


CANDIDATES = [
    "Test Item One",
    "test item two",
    "TwoExtraSpecialTest",
    "this-is-a-test",
    "the extra special trials",
    "not the extra special trials",
    "intestinal fortitude",
    "the splits",
    "nomatch",
]

MANIFEST = {
    "ID": "574f582e4e494d2e544553542e504c55",
    "ActionKeyword": "wt",
    "Name": "Wox test plugin",
    "Description": "Plugin used by the test suite",
    "Author": "tests",
    "Version": "1.0.0",
    "Language": "executable",
    "Website": "https://github.com/",
    "IcoPath": "Images/icon.png",
    "ExecuteFileName": "plugin.exe",
}


@pytest.fixture
def candidates() -> ResultList:
    return ResultList(Item.build(title) for title in CANDIDATES)


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "plugin"
    directory.mkdir()
    (directory / "plugin.json").write_text(json.dumps(MANIFEST))
    return directory


@pytest.fixture
def app_data(tmp_path: Path) -> Path:
    return tmp_path / "appdata"


@pytest.fixture
def candidate_titles() -> list[str]:
    return list(CANDIDATES)
