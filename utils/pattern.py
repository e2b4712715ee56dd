import threading
from typing import Any, Dict

class Singleton(type):
    """
    Metaclass for process-wide objects such as the Logger.
    The first call builds the instance; every later call hands back that
    same object and its arguments are discarded.
    Usage:
        class Foo(metaclass=Singleton)
    """
    _instance: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwds):
        instance = cls._instance.get(cls)
        if instance is None:
            with cls._lock:
                # another thread may have built it while we waited
                instance = cls._instance.get(cls)
                if instance is None:
                    instance = cls._instance[cls] = super().__call__(*args, **kwds)
        return instance

    def reset(cls) -> None:
        """Forget the instance of `cls` so the next call builds a new one."""
        with cls._lock:
            cls._instance.pop(cls, None)
