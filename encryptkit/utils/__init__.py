from .random_gen import KeyKind, SecureRandom
from .codec      import ConvenienceCodec
from .log_setup  import configure_logging

__all__ = ["KeyKind", "SecureRandom", "ConvenienceCodec",
           "configure_logging"]
