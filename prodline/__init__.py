"""Production-line model: elements, records, operator storage, sigmoid performance and reports."""

__version__ = "0.1.0"

__all__ = ["elements", "records", "performance", "operators", "export"]