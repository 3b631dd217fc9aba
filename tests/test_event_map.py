from htmlview.dom_model import ElementList, Text, element
from htmlview.event_map import build_event_map
from htmlview.events import ClickMessageData, Events
from htmlview.path import ROOT_PATH, path_append_key, path_from_keys


def test_path_helpers() -> None:
    assert ROOT_PATH == ""
    assert path_append_key(ROOT_PATH, "main") == "/main"
    assert path_append_key(path_append_key(ROOT_PATH, "main"), "save") == "/main/save"
    assert path_from_keys(["main", "save"]) == "/main/save"
    assert path_from_keys([]) == ROOT_PATH


def test_collects_bindings_by_keyed_path() -> None:
    save = Events(on_click=ClickMessageData(message="save"))
    edit = Events(on_input=lambda value: ("edit", value))
    body = ElementList(
        (
            (
                "form",
                element(
                    "form",
                    {},
                    {
                        "title": element("input", {}, [], edit),
                        "save": element("button", {}, "Save", save),
                        "help": element("p", {}, "unbound"),
                    },
                ),
            ),
        )
    )

    event_map = build_event_map(body)

    assert event_map == {"/form/title": edit, "/form/save": save}


def test_positional_children_use_index_keys() -> None:
    change = Events(on_change="changed")
    body = element("div", {}, [element("p", {}, "a"), element("select", {}, [], change)]).children

    assert build_event_map(body) == {"/1": change}


def test_single_element_sits_at_root_path() -> None:
    root_events = Events(on_change="root")
    child_events = Events(on_change="child")
    tree = element("div", {}, {"c": element("span", {}, "x", child_events)}, root_events)

    assert build_event_map(tree) == {"": root_events, "/c": child_events}


def test_text_children_have_no_bindings() -> None:
    assert build_event_map(Text("hello")) == {}


def test_paths_are_stable_across_rebuilds_with_stable_keys() -> None:
    def view(count: int):
        return element(
            "main",
            {},
            {
                "counter": element("span", {}, str(count)),
                "increment": element("button", {}, "+", Events(on_click=ClickMessageData(message=1))),
            },
        )

    assert build_event_map(view(0)).keys() == build_event_map(view(5)).keys()


def test_duplicate_path_keeps_last_binding() -> None:
    first = Events(on_change="first")
    last = Events(on_change="last")
    body = ElementList(
        (
            ("dup", element("input", {}, [], first)),
            ("dup", element("input", {}, [], last)),
        )
    )

    assert build_event_map(body) == {"/dup": last}
