from floodit.game_logic.interfaces.listener_collection import ListenerCollection


def test_add_is_idempotent_and_keeps_order() -> None:
    collection: ListenerCollection[str] = ListenerCollection()
    collection.add("a")
    collection.add("b")
    collection.add("a")
    collection.add("c")

    assert len(collection) == 3  # noqa: PLR2004
    assert list(collection) == ["a", "b", "c"]


def test_remove_is_idempotent() -> None:
    collection: ListenerCollection[str] = ListenerCollection()
    collection.add("a")

    collection.remove("a")
    collection.remove("a")
    collection.remove("never added")

    assert "a" not in collection
    assert len(collection) == 0


def test_iteration_runs_over_a_snapshot() -> None:
    collection: ListenerCollection[str] = ListenerCollection()
    collection.add("a")
    collection.add("b")

    seen = []
    for listener in collection:
        seen.append(listener)
        collection.remove("b")
        collection.add("c")

    assert seen == ["a", "b"]
    assert list(collection) == ["a", "c"]
