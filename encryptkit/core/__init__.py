from .crypto_engine import HashEngine, SymmetricCipherEngine

__all__ = ["HashEngine", "SymmetricCipherEngine"]
