import json

import pytest
from pydantic import ValidationError

from wox_plugin.models import Action, Item, PluginInfo, Response, RpcRequest
from wox_plugin.results import InvalidPositionError, ResultList


def test_item_build_defaults() -> None:
    item = Item.build("title")
    assert item.subtitle == ""
    assert item.icon_path == ""
    assert item.action.command == ""
    assert item.action.parameters == [""]
    assert item.action.keep_open_after_action is True


def test_item_serializes_with_host_field_names() -> None:
    item = Item.build("title", "subtitle", "icon", "method", "params", False)
    assert item.model_dump(by_alias=True) == {
        "Title": "title",
        "SubTitle": "subtitle",
        "IcoPath": "icon",
        "JsonRPCAction": {
            "method": "method",
            "parameters": ["params"],
            "dontHideAfterAction": False,
        },
    }


def test_action_requires_exactly_one_parameter() -> None:
    with pytest.raises(ValidationError):
        Action(command="open", parameters=["a", "b"])
    with pytest.raises(ValidationError):
        Action(command="open", parameters=[])


def test_response_wire_format_has_bom() -> None:
    wire = Response(result=[Item.build("Github")]).to_wire()
    assert wire.startswith("\ufeff")
    payload = json.loads(wire[1:])
    assert payload["result"][0]["Title"] == "Github"


def test_rpc_request_string_parameters() -> None:
    request = RpcRequest.model_validate_json(
        '{"method": "query", "parameters": ["text", 3, 1.5, true, null, ["a", 1]]}'
    )
    assert request.method == "query"
    assert request.string_parameters() == ["text", "3", "1.5", "true", "null", '["a",1]']


def test_plugin_info_keyword_variants() -> None:
    single = PluginInfo.model_validate({"ID": "1", "Name": "n", "ActionKeyword": "kw"})
    assert single.keywords == ["kw"]
    many = PluginInfo.model_validate({"ID": "1", "Name": "n", "ActionKeywords": ["a", "b"]})
    assert many.keywords == ["a", "b"]
    assert many.dir_name == "n-1"


def test_result_list_append_and_insert() -> None:
    results = ResultList()
    results.append(Item.build("first"))
    results.insert(Item.build("second"))

    assert len(results) == 2
    assert results.titles() == ["second", "first"]

    results.insert(Item.build("last"), position=2)
    assert results.titles() == ["second", "first", "last"]


def test_result_list_allows_duplicates() -> None:
    results = ResultList()
    results.append(Item.build("same"))
    results.append(Item.build("same"))
    assert results.titles() == ["same", "same"]


@pytest.mark.parametrize("position", [-1, 2])
def test_result_list_rejects_out_of_range_insert(position: int) -> None:
    results = ResultList([Item.build("only")])
    with pytest.raises(InvalidPositionError):
        results.insert(Item.build("new"), position=position)
    assert results.titles() == ["only"]


def test_result_list_items_is_a_snapshot() -> None:
    results = ResultList([Item.build("a")])
    snapshot = results.items()
    results.append(Item.build("b"))
    assert len(snapshot) == 1
    assert len(results) == 2
