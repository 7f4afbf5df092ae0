"""Register payment intents and settle them with a card number."""

__version__ = "0.1.0"
