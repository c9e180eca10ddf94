from .csv_backend import CsvCatalog

__all__ = ["CsvCatalog"]
