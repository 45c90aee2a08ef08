from .json_store import ProductStore
