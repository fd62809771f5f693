"""End-to-end scenarios: controller operations written through to disk."""

import json
import threading

from data import Item
from storage import ListRepository


def _record(data_dir, name):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


def test_create_list(controller, data_dir):
    assert controller.create_list("Groceries")
    state = controller.state
    assert state.collection.list_names() == ["Groceries"]
    assert state.collection.get_list(0).items == ()
    assert state.selected == 0

    assert controller.flush(5)
    assert _record(data_dir, "Groceries") == []


def test_add_and_toggle_items(controller, data_dir):
    controller.create_list("Groceries")
    assert controller.add_item(0, "Milk")
    assert controller.flush(5)
    assert _record(data_dir, "Groceries") == [{"text": "Milk", "checked": False}]

    assert controller.toggle_item(0, 0)
    assert controller.state.collection.get_list(0).items == (Item("Milk", True),)
    assert controller.flush(5)
    assert _record(data_dir, "Groceries") == [{"text": "Milk", "checked": True}]


def test_storage_order_is_insertion_order(controller, data_dir):
    from ordering import display_order

    controller.create_list("Groceries")
    controller.add_item(0, "Milk")
    controller.add_item(0, "Eggs")
    controller.toggle_item(0, 0)
    assert controller.flush(5)

    assert _record(data_dir, "Groceries") == [
        {"text": "Milk", "checked": True},
        {"text": "Eggs", "checked": False},
    ]
    items = controller.state.collection.get_list(0).items
    assert [item.text for _, item in display_order(items)] == ["Eggs", "Milk"]


def test_delete_selected_list(controller, data_dir):
    controller.create_list("Groceries")
    assert controller.state.selected == 0

    assert controller.delete_list(0)
    assert len(controller.state.collection) == 0
    assert controller.state.selected is None
    assert controller.flush(5)
    assert not (data_dir / "Groceries.json").exists()


def test_invalid_input_is_a_no_op(controller, data_dir):
    assert not controller.create_list("   ")
    assert not controller.add_item(0, "Milk")
    controller.create_list("Groceries")
    assert not controller.create_list("groceries")
    assert not controller.add_item(0, " ")
    assert not controller.toggle_item(0, 0)
    assert not controller.delete_list(3)
    assert controller.flush(5)
    assert sorted(p.name for p in data_dir.iterdir()) == ["Groceries.json"]


def test_state_survives_restart(controller, store):
    controller.create_list("Work")
    controller.add_item(0, "Report")
    controller.create_list("Home")
    controller.add_item(1, "Laundry")
    controller.toggle_item(1, 0)
    assert controller.flush(5)

    reloaded = ListRepository(store).load_all()
    by_name = {lst.name: lst.items for lst in reloaded}
    assert by_name == {
        "Work": (Item("Report"),),
        "Home": (Item("Laundry", True),),
    }


def test_rapid_mutations_end_with_latest_state_on_disk(controller, data_dir):
    controller.create_list("Groceries")
    for i in range(50):
        controller.add_item(0, f"item {i}")
    controller.toggle_item(0, 7)
    assert controller.flush(5)

    record = _record(data_dir, "Groceries")
    assert len(record) == 50
    assert record[7] == {"text": "item 7", "checked": True}


def test_recreate_after_delete(controller, data_dir):
    controller.create_list("Groceries")
    controller.add_item(0, "Milk")
    controller.delete_list(0)
    controller.create_list("Groceries")
    assert controller.flush(5)
    assert _record(data_dir, "Groceries") == []


def test_select_by_name(controller):
    controller.create_list("Work")
    controller.create_list("Home")
    assert controller.select_by_name("Work")
    assert controller.state.selected == 0
    assert not controller.select_by_name("Missing")
    assert controller.state.selected == 0


def test_case_variants_share_one_writer(controller, store, data_dir, monkeypatch):
    controller.create_list("A")
    assert controller.flush(5)

    started, release = threading.Event(), threading.Event()
    real_delete = store.delete

    def slow_delete(key):
        started.set()
        release.wait(5)
        real_delete(key)

    monkeypatch.setattr(store, "delete", slow_delete)
    controller.delete_list(0)
    assert started.wait(5)
    assert controller.create_list("a")

    # the save for "a" waits behind the remove of "A"
    assert not controller.flush(0.1)
    assert not (data_dir / "a.json").exists()

    release.set()
    assert controller.flush(5)
    assert _record(data_dir, "a") == []
