"""
fxconvert - Live Currency Conversion Client

Loads the currencies supported by the CurrencyFreaks rate service and
converts amounts between two of them using the latest exchange rate.
"""

__version__ = "1.0.0"
