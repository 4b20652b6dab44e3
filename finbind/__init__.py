"""Typed async client bindings for the GMO Aozora Net Bank API and the GMO deferred-payment gateway."""

__version__ = "0.1.0"
