from appcontext.storage.base import ContextStorage
from appcontext.storage.contextvar_storage import ContextVarContextStorage
from appcontext.storage.in_memory_storage import InMemoryContextStorage
from appcontext.storage.null_storage import NullContextStorage

__all__ = [
    "ContextStorage",
    "ContextVarContextStorage",
    "InMemoryContextStorage",
    "NullContextStorage",
]
