import itertools
import os
import re
import threading
import time


OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()
_process_random = os.urandom(5)


def new_object_id() -> str:
    """
    Новый 24-символьный hex идентификатор в формате ObjectId:
    4 байта времени (секунды), 5 случайных байт процесса, 3 байта счётчика.
    """
    with _counter_lock:
        counter = next(_counter) & 0xFFFFFF
    raw = (
        int(time.time()).to_bytes(4, "big")
        + _process_random
        + counter.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_object_id(value: str | None) -> bool:
    return bool(value) and OBJECT_ID_RE.fullmatch(value) is not None


def normalize_object_id(value: str) -> str:
    return value.lower()
