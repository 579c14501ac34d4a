from .loader import LoadedColumns, load_columns

__all__ = ["LoadedColumns", "load_columns"]
