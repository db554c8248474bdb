"""Thread Safety Example - Sharing one Lang across threads.

Thread Safety:
    Lang resolves against an immutable Catalog snapshot. set_messages()
    builds a new snapshot and swaps one reference, so readers never need a
    lock and never see half of an update.

Demonstrates:
1. Concurrent reads from a shared Lang
2. Switching catalogs while readers are running

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from langresolver import Lang

EN = {"messages": {"hello": "Hello, :name!", "items": "{1}one item|[2,*]:count items"}}
FR = {"messages": {"hello": "Bonjour, :name !", "items": "{1}un article|[2,*]:count articles"}}


def example_1_concurrent_reads() -> None:
    """Example 1: Many threads resolving from one Lang."""
    print("=" * 60)
    print("Example 1: Concurrent Reads")
    print("=" * 60)

    lang = Lang(EN)

    def work(i: int) -> str:
        return f"{lang.get('hello', {'name': f'User{i}'})} {lang.choice('items', i)}"

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(work, i) for i in range(1, 6)]
        for future in as_completed(futures):
            print(future.result())


def example_2_swap_while_reading() -> None:
    """Example 2: set_messages() under load."""
    print("\n" + "=" * 60)
    print("Example 2: Catalog Swap While Reading")
    print("=" * 60)

    lang = Lang(EN)
    stop = threading.Event()
    seen: set[str] = set()
    lock = threading.Lock()

    def reader() -> None:
        while not stop.is_set():
            text = lang.choice("items", 1)
            with lock:
                seen.add(text)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for i in range(100):
        lang.set_messages(FR if i % 2 == 0 else EN)
    stop.set()
    for t in threads:
        t.join()

    print(f"Observed: {sorted(seen)}")
    # Output: Observed: ['one item', 'un article'] (never a mix)


if __name__ == "__main__":
    example_1_concurrent_reads()
    example_2_swap_while_reading()
