from . import awaitables, mappings, sequences

__all__: list[str] = ["awaitables", "mappings", "sequences"]
