import itertools
import threading

from csterms.services.glossary_store import GlossaryStore


SHORT_API = "Interface text."  # 15 chars
LONG_API = "Interface that lets programs talk to it."  # 40 chars


def test_merge_inserts_and_prefers_longer_definition():
    store = GlossaryStore()
    assert store.merge({"API": SHORT_API}) == 1
    assert store.merge({"API": LONG_API}) == 1
    assert store.get("API") == (LONG_API, True)
    # A shorter definition never replaces a longer one
    assert store.merge({"API": SHORT_API}) == 0
    assert store.get("API") == (LONG_API, True)


def test_merge_tie_keeps_first_seen():
    store = GlossaryStore()
    store.merge([("Heap", "Tree-based structure A")])
    store.merge([("Heap", "Tree-based structure B")])
    assert store.get("Heap") == ("Tree-based structure A", True)


def test_merge_is_order_independent():
    source_a = {"API": SHORT_API, "Stack": "LIFO collection of items."}
    source_b = {"API": LONG_API, "Queue": "FIFO collection of items."}
    results = []
    for order in itertools.permutations([source_a, source_b]):
        store = GlossaryStore()
        for pairs in order:
            store.merge(pairs)
        results.append(store.get_all())
    assert results[0] == results[1]
    assert results[0]["API"] == LONG_API


def test_merge_is_idempotent():
    pairs = {"API": LONG_API, "Stack": "LIFO collection of items."}
    store = GlossaryStore()
    store.merge(pairs)
    first = store.get_all()
    assert store.merge(pairs) == 0
    assert store.get_all() == first


def test_get_is_exact_and_case_sensitive():
    store = GlossaryStore({"Compiler": "Translates source code into machine code."})
    assert store.get("Compiler") == ("Translates source code into machine code.", True)
    assert store.get("compiler") == (None, False)
    assert store.get("Nonexistent") == (None, False)


def test_get_all_returns_a_copy():
    store = GlossaryStore({"Bit": "Binary digit"})
    snapshot = store.get_all()
    snapshot["Bit"] = "mutated"
    snapshot["Byte"] = "Eight bits"
    assert store.get_all() == {"Bit": "Binary digit"}
    assert len(store) == 1


def test_search_matches_term_or_definition_case_insensitively():
    store = GlossaryStore(
        {
            "Compiler": "Translates source code into machine code.",
            "Interpreter": "Executes source code directly.",
            "Cache": "Fast storage layer for frequently accessed data.",
        }
    )
    assert set(store.search("SOURCE")) == {"Compiler", "Interpreter"}
    assert set(store.search("cach")) == {"Cache"}
    assert store.search("quantum") == {}


def test_concurrent_merges_keep_longest_definition():
    store = GlossaryStore()
    definitions = ["x" * n for n in range(10, 60)]
    barrier = threading.Barrier(len(definitions))

    def worker(definition: str) -> None:
        barrier.wait()
        for i in range(50):
            store.merge({f"term-{i}": definition})

    threads = [threading.Thread(target=worker, args=(d,)) for d in definitions]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 50
    assert all(d == "x" * 59 for d in store.get_all().values())
