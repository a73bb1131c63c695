"""paysim - card-payment checkout simulator."""

__version__ = "0.1.0"
