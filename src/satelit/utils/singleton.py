import threading


class SingletonMeta(type):
    """
    Thread-safe metaclass that hands out one instance per class.
    """

    _instances = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


    def drop_instance(cls, instance=None):
        """Forget the cached instance, so the next call builds a fresh one."""
        with cls._lock:
            if instance is None or cls._instances.get(cls) is instance:
                cls._instances.pop(cls, None)
